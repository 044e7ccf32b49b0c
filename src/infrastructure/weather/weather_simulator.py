# Simulador de clima (usado quando a API de clima falha)
# Execução:
#   python -m src.infrastructure.weather.weather_simulator --n 5 --seed 42

from __future__ import annotations

import argparse
import random
from typing import Dict, Optional, Tuple

from config.settings import WEATHER_FALLBACK_RANGES
from src.domain.value_objects import WeatherReading


def _draw(rng: random.Random, bounds: Tuple[int, int]) -> int:
    """Inteiro uniforme em [lo, hi) (mesmo recorte do floor(random*(hi-lo)+lo))."""
    lo, hi = bounds
    return int(rng.random() * (hi - lo) + lo)


def simulate_weather(
    rng: Optional[random.Random] = None,
    ranges: Dict[str, Tuple[int, int]] = WEATHER_FALLBACK_RANGES,
) -> WeatherReading:
    """
    Gera uma leitura plausível:
    temperatura 20–37 °C, umidade 25–94 %, chuva 0–79 mm (inteiros).

    Args:
        rng: gerador injetável (testes usam semente fixa).
        ranges: limites por grandeza; o superior é exclusivo.
    """
    rng = rng or random.Random()
    return WeatherReading(
        temperature_c=float(_draw(rng, ranges["temperature"])),
        humidity_pct=float(_draw(rng, ranges["humidity"])),
        rainfall_mm=float(_draw(rng, ranges["rainfall"])),
    )


def main():
    ap = argparse.ArgumentParser(description="Simulador de clima local")
    ap.add_argument("--n", type=int, default=1, help="quantidade de leituras")
    ap.add_argument("--seed", type=int, default=None, help="semente do PRNG")
    args = ap.parse_args()

    rng = random.Random(args.seed)
    for _ in range(args.n):
        w = simulate_weather(rng)
        print(f"temp={w.temperature_c:.0f}°C hum={w.humidity_pct:.0f}% rain={w.rainfall_mm:.0f}mm")


if __name__ == "__main__":
    main()
