# src/domain/use_cases/feeding_log_use_case.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import List, Optional
import json
import logging

from src.domain.entities.feeding_record import PondFeedingRecord
from src.domain.repositories.feeding_record_repository import IFeedingRecordRepository

log = logging.getLogger("camarao.usecases.feeding_log")

@dataclass(frozen=True)
class FeedingLogExport:
    """Conteúdo JSON pronto para download e o nome de arquivo sugerido."""
    filename: str
    content: str

class FeedingLogUseCase:
    """
    Caderno de trato: lançar, listar, apagar e exportar registros.
    Toda alteração devolve a lista atualizada (mais recente primeiro).
    """

    def __init__(self, record_repo: IFeedingRecordRepository) -> None:
        self.record_repo = record_repo

    def list_records(self) -> List[PondFeedingRecord]:
        return self.record_repo.list_all()

    def add(self, record: PondFeedingRecord) -> List[PondFeedingRecord]:
        self.record_repo.add(record)
        log.info("feeding_record_saved id=%s pond=%s amount=%.2f", record.id, record.pond_name, record.feed_amount)
        return self.list_records()

    def delete(self, record_id: str) -> List[PondFeedingRecord]:
        self.record_repo.delete(record_id)
        log.info("feeding_record_deleted id=%s", record_id)
        return self.list_records()

    def clear(self) -> None:
        self.record_repo.clear()
        log.info("feeding_records_cleared")

    def export_json(self, today: Optional[date] = None) -> FeedingLogExport:
        """
        Serializa todos os registros (JSON indentado com 2 espaços).

        O nome segue `prawn-feeding-records-AAAA-MM-DD.json`.
        """
        day = (today or date.today()).isoformat()
        payload = [r.to_dict() for r in self.list_records()]
        return FeedingLogExport(
            filename=f"prawn-feeding-records-{day}.json",
            content=json.dumps(payload, indent=2, ensure_ascii=False),
        )
