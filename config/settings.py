# configurações globais
import os

LOG_LEVEL = os.getenv("CAMARAO_LOG_LEVEL", "INFO")

# clima (OpenWeatherMap, plano gratuito)
OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
OPENWEATHER_CITY = os.getenv("OPENWEATHER_CITY", "Manila,ph")
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")
WEATHER_TIMEOUT_S = 5.0
WEATHER_REFRESH_MINUTES = 30

# faixas do clima simulado quando a API falha (limite superior exclusivo)
WEATHER_FALLBACK_RANGES = {
    'temperature': (20, 38),
    'humidity': (25, 95),
    'rainfall': (0, 80),
}

# valores iniciais dos formulários do painel
DEFAULT_PRAWN_AGE_DAYS = 45
DEFAULT_STOCKING_DENSITY = 40_000

# últimos N registros de consumo usados na previsão por viveiro
CONSUMPTION_HISTORY_N = 7
