"""
Previsão de desempenho de um viveiro sob as condições climáticas atuais.

`PondPrediction` é o resultado do motor de regras em
`src.domain.engine.pond_prediction`. É criado a cada avaliação e nunca
alterado depois: mudou o clima ou o consumo, recalcula-se tudo.

Invariantes
-----------
- `survival_rate_pct` ∈ [50, 95].
- `fcr` ∈ [1.3, 3.0], arredondado em 2 casas.
- `recommendations` preserva a ordem em que os fatores foram avaliados
  (temperatura, chuva, umidade, consumo, área).
- `growth_rate` e `risk_level` são os valores acumulados pelas etapas e não
  são recalculados a partir dos números já limitados; combinações como
  crescimento "reduced" com sobrevivência 95% são possíveis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from src.domain.enums import GrowthRate, RiskLevel


@dataclass(frozen=True)
class PondPrediction:
    """
    Attributes:
        growth_rate: Classe de crescimento prevista.
        survival_rate_pct: Sobrevivência estimada (%).
        days_to_harvest: Dias até a despesca (base 120).
        fcr: Conversão alimentar (kg de ração / kg de biomassa ganha).
        risk_level: Nível de risco do viveiro.
        recommendations: Orientações de manejo, na ordem de avaliação.
    """
    growth_rate: GrowthRate
    survival_rate_pct: float
    days_to_harvest: int
    fcr: float
    risk_level: RiskLevel
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "growth_rate": self.growth_rate.value,
            "survival_rate_pct": self.survival_rate_pct,
            "days_to_harvest": self.days_to_harvest,
            "fcr": self.fcr,
            "risk_level": self.risk_level.value,
            "recommendations": list(self.recommendations),
        }
