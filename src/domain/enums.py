from __future__ import annotations

from enum import Enum


class PondStatus(Enum):
    """Estado operacional do viveiro."""
    ACTIVE = "active"            # Em cultivo
    INACTIVE = "inactive"        # Vazio / fora de operação
    MAINTENANCE = "maintenance"  # Em manutenção (secagem, calagem, reparos)


class AreaUnit(Enum):
    """Unidade da área informada no cadastro do viveiro."""
    HECTARES = "hectares"
    ACRES = "acres"


class GrowthRate(Enum):
    """Classe de crescimento prevista, da pior para a melhor."""
    SEVERELY_REDUCED = "severely reduced"
    REDUCED = "reduced"
    NORMAL = "normal"
    ACCELERATED = "accelerated"

    def step_up(self) -> GrowthRate:
        """Sobe um degrau; ACCELERATED é o teto."""
        order = list(GrowthRate)
        return order[min(order.index(self) + 1, len(order) - 1)]


class RiskLevel(Enum):
    """Nível de risco do viveiro, do menor para o maior."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return list(RiskLevel).index(self)

    def at_least(self, floor: RiskLevel) -> RiskLevel:
        """Escala até `floor` sem nunca rebaixar."""
        return self if self.rank >= floor.rank else floor

    def step_up(self) -> RiskLevel:
        """LOW→MEDIUM→HIGH; HIGH e CRITICAL permanecem."""
        if self is RiskLevel.LOW:
            return RiskLevel.MEDIUM
        if self is RiskLevel.MEDIUM:
            return RiskLevel.HIGH
        return self

    def step_down(self) -> RiskLevel:
        """CRITICAL→HIGH→MEDIUM; MEDIUM e LOW permanecem."""
        if self is RiskLevel.CRITICAL:
            return RiskLevel.HIGH
        if self is RiskLevel.HIGH:
            return RiskLevel.MEDIUM
        return self


class Severity(Enum):
    """Severidade de uma recomendação de manejo por clima."""
    LOW = "low"        # Informativo
    MEDIUM = "medium"  # Atenção
    HIGH = "high"      # Ação imediata


class CareType(Enum):
    """Origem climática da recomendação de manejo."""
    TEMPERATURE = "temperature"
    RAINFALL = "rainfall"
    HUMIDITY = "humidity"
