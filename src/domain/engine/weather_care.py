# src/domain/engine/weather_care.py
from __future__ import annotations

from typing import List, Optional

from src.domain.entities.weather_care import WeatherCareRecommendation
from src.domain.enums import CareType, Severity


def _temperature_care(temperature: float) -> Optional[WeatherCareRecommendation]:
    if temperature > 35:
        return WeatherCareRecommendation(
            CareType.TEMPERATURE, Severity.HIGH,
            "Alerta de temperatura alta",
            "Os camarões podem sofrer estresse por causa da temperatura alta.",
            (
                "Aumente a aeração para manter o oxigênio dissolvido adequado.",
                "Considere aeradores adicionais ou aerador de pás.",
                "Ofereça a ração nos horários mais frescos (início da manhã, fim da tarde).",
                "Reduza a quantidade de ração em 15-20%.",
                "Monitore o oxigênio de perto, principalmente de madrugada.",
            ),
        )
    if temperature < 22:
        return WeatherCareRecommendation(
            CareType.TEMPERATURE, Severity.MEDIUM,
            "Alerta de temperatura baixa",
            "O metabolismo dos camarões desacelera em temperaturas baixas.",
            (
                "Reduza a ração em 30%, pois o consumo cai.",
                "Acompanhe as sobras de ração para não degradar a água.",
                "Verifique os parâmetros da água com mais frequência.",
                "Considere probióticos para manter a qualidade da água.",
                "Ajuste o teor de proteína se o frio persistir.",
            ),
        )
    if 28 <= temperature <= 32:
        return WeatherCareRecommendation(
            CareType.TEMPERATURE, Severity.LOW,
            "Temperatura ideal",
            "A temperatura atual está na faixa ideal para o crescimento.",
            (
                "Mantenha o cronograma normal de tratos.",
                "Monitore os parâmetros de rotina da água.",
                "Siga as práticas padrão de manejo do viveiro.",
            ),
        )
    return None


def _rainfall_care(temperature: float, rainfall: float) -> Optional[WeatherCareRecommendation]:
    if rainfall > 50:
        return WeatherCareRecommendation(
            CareType.RAINFALL, Severity.HIGH,
            "Alerta de chuva forte",
            "Chuva forte pode alterar a qualidade da água e estressar os camarões.",
            (
                "Verifique e corrija o pH se necessário.",
                "Monitore a salinidade, que tende a cair com a água da chuva.",
                "Confira se a drenagem está funcionando.",
                "Reduza ou suspenda os tratos se a água estiver muito turva.",
                "Aplique calcário se o pH cair muito.",
                "Observe mudanças bruscas de cor ou odor da água.",
            ),
        )
    if 20 < rainfall <= 50:
        return WeatherCareRecommendation(
            CareType.RAINFALL, Severity.MEDIUM,
            "Chuva moderada",
            "Chuva moderada pode causar alterações nos parâmetros da água.",
            (
                "Monitore o pH e corrija se necessário.",
                "Observe mudanças incomuns na cor da água.",
                "Garanta entrada e saída de água adequadas.",
                "Ajuste a ração se a água ficar turva.",
            ),
        )
    if rainfall <= 5 and temperature > 30:
        return WeatherCareRecommendation(
            CareType.RAINFALL, Severity.MEDIUM,
            "Tempo seco",
            "Pouca chuva com temperatura alta pode piorar a qualidade da água.",
            (
                "Mantenha o nível de água do viveiro.",
                "Aumente a renovação de água se necessário.",
                "Monitore o oxigênio dissolvido com mais frequência.",
                "Reponha água doce para compensar a evaporação.",
            ),
        )
    return None


def _humidity_care(temperature: float, humidity: float) -> Optional[WeatherCareRecommendation]:
    if humidity > 90 and temperature > 30:
        return WeatherCareRecommendation(
            CareType.HUMIDITY, Severity.MEDIUM,
            "Umidade e temperatura altas",
            "Umidade e temperatura altas juntas podem reduzir o oxigênio.",
            (
                "Aumente a aeração, principalmente à noite.",
                "Monitore o oxigênio de perto no início da manhã.",
                "Reduza a densidade de estocagem nos próximos ciclos se a condição for sazonal.",
                "Tenha equipamento de oxigenação de emergência à mão.",
            ),
        )
    if humidity < 30:
        return WeatherCareRecommendation(
            CareType.HUMIDITY, Severity.LOW,
            "Alerta de umidade baixa",
            "Umidade baixa aumenta a evaporação da água.",
            (
                "Monitore o nível de água com mais frequência.",
                "Esteja pronto para repor água doce.",
                "Verifique a salinidade, que tende a subir com a evaporação.",
            ),
        )
    return None


def weather_care_recommendations(
    temperature_c: float,
    humidity_pct: float,
    rainfall_mm: float,
) -> List[WeatherCareRecommendation]:
    """
    Recomendações de manejo para o clima atual.

    No máximo uma por fator, sempre na ordem temperatura, chuva, umidade.
    """
    candidatas = (
        _temperature_care(temperature_c),
        _rainfall_care(temperature_c, rainfall_mm),
        _humidity_care(temperature_c, humidity_pct),
    )
    return [c for c in candidatas if c is not None]
