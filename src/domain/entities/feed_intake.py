"""
Registro de consumo de ração por viveiro.

Este módulo define a entidade imutável `FeedIntakeRecord`: quanto foi
ofertado e quanto foi consumido num dia de trato. A taxa de consumo derivada
é o principal indicador de saúde/estresse usado pelo motor de previsão.

Princípios:
- **Imutabilidade**: o dataclass é `frozen=True`.
- **Validação na fronteira**: quantidades negativas, ração zerada ou consumo
  maior que o ofertado levantam `ValueError` no `__post_init__`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
import math
import uuid
from typing import Literal


@dataclass(frozen=True)
class FeedIntakeRecord:
    """
    Quantidade ofertada e consumida por um viveiro em uma data.

    Attributes:
        pond_id: Identificador do viveiro.
        feed_amount_kg: Ração ofertada (kg), > 0.
        consumed_kg: Ração consumida (kg), entre 0 e `feed_amount_kg`.
        date: Data do trato (default: hoje).
        notes: Observações livres.
        id: Identificador único (uuid4 em hex se omitido).
    """
    pond_id: str
    feed_amount_kg: float
    consumed_kg: float
    date: date = field(default_factory=date.today)
    notes: str = ""
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if not str(self.pond_id).strip():
            raise ValueError("Selecione um viveiro para o registro de consumo.")
        if not math.isfinite(self.feed_amount_kg) or self.feed_amount_kg <= 0:
            raise ValueError("Quantidade de ração deve ser > 0 (kg).")
        if not math.isfinite(self.consumed_kg) or self.consumed_kg < 0:
            raise ValueError("Quantidade consumida não pode ser negativa.")
        if self.consumed_kg > self.feed_amount_kg:
            raise ValueError("Quantidade consumida não pode ser maior que a ofertada.")

    @property
    def consumption_rate_pct(self) -> float:
        """Percentual da ração ofertada que foi consumida."""
        return self.consumed_kg / self.feed_amount_kg * 100.0

    def consumption_band(self) -> Literal["bom", "atencao", "ruim"]:
        """Faixa de exibição: ≥80% bom, ≥60% atenção, abaixo disso ruim."""
        rate = self.consumption_rate_pct
        if rate >= 80:
            return "bom"
        if rate >= 60:
            return "atencao"
        return "ruim"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pond_id": self.pond_id,
            "date": self.date.isoformat(),
            "feed_amount_kg": self.feed_amount_kg,
            "consumed_kg": self.consumed_kg,
            "consumption_rate_pct": round(self.consumption_rate_pct, 1),
            "notes": self.notes,
        }
