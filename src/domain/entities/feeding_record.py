from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
import math
import uuid


@dataclass(frozen=True)
class PondFeedingRecord:
    """
    Lançamento do caderno de trato (o que foi dado, quando e em qual viveiro).

    - Imutável.
    - Nome do viveiro, tipo de ração e quantidade positiva são obrigatórios.
    - `date` é a data do trato; `feeding_time` é o horário livre ("06:00").
    """
    pond_name: str
    feed_type: str
    feed_amount: float
    pond_size: float = 0.0
    feeding_time: str = ""
    notes: str = ""
    date: date = field(default_factory=date.today)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if not self.pond_name.strip() or not self.feed_type.strip():
            raise ValueError("Preencha o viveiro e o tipo de ração.")
        if not math.isfinite(self.feed_amount) or self.feed_amount <= 0:
            raise ValueError("Quantidade de ração deve ser > 0.")
        if not math.isfinite(self.pond_size) or self.pond_size < 0:
            raise ValueError("Área do viveiro não pode ser negativa.")

    def to_dict(self) -> dict:
        """Formato de exportação (chaves iguais às do arquivo JSON)."""
        return {
            "id": self.id,
            "pondName": self.pond_name,
            "pondSize": self.pond_size,
            "feedType": self.feed_type,
            "feedAmount": self.feed_amount,
            "feedingTime": self.feeding_time,
            "notes": self.notes,
            "date": self.date.isoformat(),
        }
