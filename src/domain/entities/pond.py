from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import math
import uuid

from src.domain.enums import AreaUnit, PondStatus

# 1 acre = 0,404686 ha
HECTARES_PER_ACRE = 0.404686


@dataclass(frozen=True)
class PondSnapshot:
    """
    Recorte do viveiro consumido pelo motor de previsão.

    - size_ha: área em hectares
    - consumption_rate_pct: % da ração ofertada efetivamente consumida (0–100)
    """
    id: str
    size_ha: float
    consumption_rate_pct: float


@dataclass(frozen=True)
class Pond:
    """
    Representa um viveiro de camarão.
    - Imutável (dataclass frozen)
    - Valida campos essenciais no __post_init__
    - Converte a área para hectares independente da unidade cadastrada
    - Serializa para dicionário com valores prontos para API/log
    """
    id: str
    pond_number: str
    size: float
    uom: AreaUnit = AreaUnit.HECTARES
    feeding_type: str = ""
    status: PondStatus = PondStatus.ACTIVE

    def __post_init__(self):
        """
        Regras de consistência de dados:
        - id e número do viveiro não podem ser vazios
        - size > 0 (NaN rejeitado)
        """
        if not str(self.id).strip():
            raise ValueError("Id do viveiro não pode estar vazio.")
        if not self.pond_number.strip():
            raise ValueError("Número do viveiro não pode estar vazio.")
        if not math.isfinite(self.size) or self.size <= 0:
            raise ValueError("Área do viveiro deve ser > 0.")

    @staticmethod
    def create(
        pond_number: str,
        size: float,
        uom: AreaUnit = AreaUnit.HECTARES,
        feeding_type: str = "",
        status: PondStatus = PondStatus.ACTIVE,
    ) -> "Pond":
        """Cria um viveiro novo com id gerado (uuid4 em hex)."""
        return Pond(uuid.uuid4().hex, pond_number.strip(), float(size), uom, feeding_type.strip(), status)

    @property
    def size_ha(self) -> float:
        """Área em hectares (acres são convertidos)."""
        if self.uom is AreaUnit.ACRES:
            return self.size * HECTARES_PER_ACRE
        return self.size

    @property
    def is_active(self) -> bool:
        return self.status is PondStatus.ACTIVE

    def snapshot(self, consumption_rate_pct: float) -> PondSnapshot:
        """Congela área + taxa de consumo para uma avaliação do motor."""
        return PondSnapshot(self.id, self.size_ha, consumption_rate_pct)

    def to_dict(self, consumption_rate_pct: Optional[float] = None) -> dict:
        """
        Serialização amigável para APIs/logs.
        - 'uom' e 'status' exportados pelo valor do enum
        - 'size_ha' arredondado em 3 casas decimais
        """
        d = {
            "id": self.id,
            "pond_number": self.pond_number,
            "size": self.size,
            "uom": self.uom.value,
            "size_ha": round(self.size_ha, 3),
            "feeding_type": self.feeding_type,
            "status": self.status.value,
        }
        if consumption_rate_pct is not None:
            d["consumption_rate_pct"] = consumption_rate_pct
        return d
