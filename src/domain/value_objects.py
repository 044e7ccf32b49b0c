import math
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherReading:
    """
    Value Object para uma leitura do clima local.

    - Imutável (frozen).
    - Rejeita NaN/infinito e valores fisicamente impossíveis no __post_init__.
    - Em caso de valor inválido, levanta ValueError com mensagem padronizada.

    Os motores de previsão recebem os três escalares soltos; esta é a
    guarda de fronteira usada pelos casos de uso e pelo painel.
    """
    temperature_c: float
    humidity_pct: float
    rainfall_mm: float

    def __post_init__(self):
        for nome, valor in (
            ("Temperatura", self.temperature_c),
            ("Umidade", self.humidity_pct),
            ("Chuva", self.rainfall_mm),
        ):
            if not math.isfinite(valor):
                raise ValueError(f"{nome} inválida: {valor}")
        if not (0.0 <= self.humidity_pct <= 100.0):
            raise ValueError(f"Umidade inválida: {self.humidity_pct}%. Range: 0-100%")
        if self.rainfall_mm < 0:
            raise ValueError(f"Chuva inválida: {self.rainfall_mm} mm (negativa)")

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature_c,
            "humidity": self.humidity_pct,
            "rainfall": self.rainfall_mm,
        }
