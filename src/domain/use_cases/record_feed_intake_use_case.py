# src/domain/use_cases/record_feed_intake_use_case.py
from __future__ import annotations
from datetime import date
from typing import Optional
import logging

from src.domain.entities.feed_intake import FeedIntakeRecord
from src.domain.repositories.feed_intake_repository import IFeedIntakeRepository
from src.domain.repositories.pond_repository import IPondRepository

log = logging.getLogger("camarao.usecases.intake")

class RecordFeedIntakeUseCase:
    """
    Registra ofertado x consumido de um viveiro e devolve o registro com a
    taxa de consumo calculada.
    """

    def __init__(self, pond_repo: IPondRepository, intake_repo: IFeedIntakeRepository) -> None:
        self.pond_repo = pond_repo
        self.intake_repo = intake_repo

    def execute(self, pond_id: str, feed_amount_kg: float, consumed_kg: float,
                notes: str = "", when: Optional[date] = None) -> FeedIntakeRecord:
        """
        Raises:
            ValueError: viveiro não selecionado/inexistente, ração ≤ 0 ou
            consumo maior que o ofertado.
        """
        if not pond_id:
            raise ValueError("Selecione um viveiro para o registro de consumo.")
        if not self.pond_repo.get(pond_id):
            raise ValueError(f"Viveiro {pond_id} não encontrado")

        record = FeedIntakeRecord(
            pond_id=pond_id,
            feed_amount_kg=float(feed_amount_kg),
            consumed_kg=float(consumed_kg),
            date=when or date.today(),
            notes=notes.strip(),
        )
        self.intake_repo.add(record)
        log.info("intake_saved pond=%s feed=%.2f consumed=%.2f rate=%.1f",
                 pond_id, record.feed_amount_kg, record.consumed_kg, record.consumption_rate_pct)
        return record
