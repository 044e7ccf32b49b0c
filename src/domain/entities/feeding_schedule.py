from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FeedingSchedule:
    """
    Plano diário de arraçoamento de um viveiro.

    - daily_amount_kg: ração total do dia, arredondada em 2 casas
    - feeding_times: horários "HH:MM" em ordem
    - protein_content_pct / feed_type / feed_size_mm: especificação da ração
    - application_method: forma de oferta (lanço, bandeja...)
    """
    daily_amount_kg: float
    feeding_times: Tuple[str, ...]
    protein_content_pct: float
    feed_type: str
    feed_size_mm: float
    application_method: str

    @property
    def feedings_per_day(self) -> int:
        return len(self.feeding_times)

    @property
    def amount_per_feeding_kg(self) -> float:
        """Divisão igual entre os tratos do dia."""
        return round(self.daily_amount_kg / self.feedings_per_day, 2)

    def to_dict(self) -> dict:
        return {
            "daily_amount_kg": self.daily_amount_kg,
            "feeding_times": list(self.feeding_times),
            "protein_content_pct": self.protein_content_pct,
            "feed_type": self.feed_type,
            "feed_size_mm": self.feed_size_mm,
            "application_method": self.application_method,
        }
