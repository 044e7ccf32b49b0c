from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from src.domain.enums import CareType, Severity


@dataclass(frozen=True)
class WeatherCareRecommendation:
    """
    Recomendação de manejo motivada por uma condição climática.

    Attributes:
        type: Fator climático que originou a recomendação.
        severity: LOW (informativo), MEDIUM (atenção) ou HIGH (ação imediata).
        title: Título curto para exibição.
        description: Uma frase explicando o efeito sobre os camarões.
        actions: Ações sugeridas, em ordem de prioridade.
    """
    type: CareType
    severity: Severity
    title: str
    description: str
    actions: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "actions": list(self.actions),
        }
