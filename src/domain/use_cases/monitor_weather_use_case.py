# src/domain/use_cases/monitor_weather_use_case.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List
import logging

from src.domain.engine.feeding_schedule import weather_feeding_advice
from src.domain.engine.weather_care import weather_care_recommendations
from src.domain.entities.weather_care import WeatherCareRecommendation
from src.domain.enums import Severity
from src.domain.value_objects import WeatherReading

log = logging.getLogger("camarao.usecases.weather")

# assinatura do fornecedor de clima (injeção de dependência)
WeatherProvider = Callable[[], WeatherReading]

@dataclass(frozen=True)
class WeatherReport:
    """
    DTO imutável com o clima atual e o que fazer a respeito.

    Atributos:
        weather: leitura usada.
        care: recomendações de manejo (temperatura, chuva, umidade).
        feeding_advice: orientação única de arraçoamento.
    """
    weather: WeatherReading
    care: List[WeatherCareRecommendation]
    feeding_advice: str

    @property
    def has_high_severity(self) -> bool:
        return any(c.severity is Severity.HIGH for c in self.care)

class MonitorWeatherUseCase:
    """
    Busca o clima no fornecedor e deriva as recomendações de manejo e de ração.
    """

    def __init__(self, provider: WeatherProvider) -> None:
        self.provider = provider

    def execute(self) -> WeatherReport:
        weather = self.provider()
        care = weather_care_recommendations(weather.temperature_c, weather.humidity_pct, weather.rainfall_mm)
        advice = weather_feeding_advice(weather.temperature_c, weather.rainfall_mm)

        log.info("weather_checked temp=%.1f hum=%.1f rain=%.1f care=%d",
                 weather.temperature_c, weather.humidity_pct, weather.rainfall_mm, len(care))
        for c in care:
            if c.severity is Severity.HIGH:
                log.warning("weather_alert type=%s title=%s", c.type.value, c.title)

        return WeatherReport(weather=weather, care=care, feeding_advice=advice)
