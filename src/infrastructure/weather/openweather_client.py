# src/infrastructure/weather/openweather_client.py
"""
Clima atual via OpenWeatherMap (endpoint /data/2.5/weather, unidades métricas).

Qualquer falha (sem chave, erro HTTP, timeout, payload inesperado) cai no
simulador, de modo que o painel sempre tem uma leitura. A origem fica
registrada em `WeatherService.last_source`.
"""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, Literal, Optional

import requests

from config.settings import (
    OPENWEATHER_API_KEY, OPENWEATHER_CITY, OPENWEATHER_URL, WEATHER_TIMEOUT_S,
)
from src.domain.value_objects import WeatherReading
from src.infrastructure.weather.weather_simulator import simulate_weather

log = logging.getLogger("camarao.infra.weather")

WeatherSource = Literal["api", "simulado"]


def parse_current_weather(data: Dict[str, Any]) -> WeatherReading:
    """
    Converte o JSON da API:
    - temperatura arredondada (°C)
    - umidade como veio (%)
    - chuva: rain["1h"] × 10 arredondado, ou 0 se não houver chuva
    """
    main = data["main"]
    rain = data.get("rain") or {}
    rainfall = round(float(rain["1h"]) * 10) if "1h" in rain else 0
    return WeatherReading(
        temperature_c=float(round(float(main["temp"]))),
        humidity_pct=float(main["humidity"]),
        rainfall_mm=float(rainfall),
    )


def fetch_current_weather(
    city: str = OPENWEATHER_CITY,
    api_key: str = OPENWEATHER_API_KEY,
    timeout: float = WEATHER_TIMEOUT_S,
    session: Optional[requests.Session] = None,
) -> WeatherReading:
    """
    Busca o clima atual na API.

    Raises:
        requests.RequestException: falha de rede/HTTP.
        ValueError: chave ausente ou resposta fora do formato.
    """
    if not api_key:
        raise ValueError("OPENWEATHER_API_KEY não configurada")
    http = session or requests
    resp = http.get(
        OPENWEATHER_URL,
        params={"q": city, "units": "metric", "appid": api_key},
        timeout=timeout,
    )
    resp.raise_for_status()
    try:
        return parse_current_weather(resp.json())
    except (KeyError, TypeError) as e:
        raise ValueError(f"Resposta de clima inesperada: {e}") from e


class WeatherService:
    """
    Fornecedor de clima para os casos de uso (chamável sem argumentos).
    Tenta a API; se falhar, registra o motivo e usa o simulador.
    """

    def __init__(self, city: str = OPENWEATHER_CITY, api_key: str = OPENWEATHER_API_KEY,
                 rng: Optional[random.Random] = None,
                 session: Optional[requests.Session] = None) -> None:
        self.city = city
        self.api_key = api_key
        self.rng = rng
        self.session = session
        self.last_source: Optional[WeatherSource] = None

    def __call__(self) -> WeatherReading:
        try:
            reading = fetch_current_weather(self.city, self.api_key, session=self.session)
            self.last_source = "api"
            log.info("weather_fetched city=%s temp=%.0f", self.city, reading.temperature_c)
            return reading
        except (requests.RequestException, ValueError) as e:
            log.warning("weather_fallback city=%s reason=%s", self.city, e)
            self.last_source = "simulado"
            return simulate_weather(self.rng)
