# src/domain/use_cases/generate_analytics_use_case.py
from __future__ import annotations
from dataclasses import dataclass
from statistics import mean
from typing import Dict, Any, Iterable
import logging

from src.domain.repositories.feed_intake_repository import IFeedIntakeRepository
from src.domain.repositories.pond_repository import IPondRepository
from src.domain.entities.feed_intake import FeedIntakeRecord

log = logging.getLogger("camarao.usecases.analytics")

@dataclass(frozen=True)
class AnalyticsResult:
    """
    DTO imutável para retorno do caso de uso.

    Atributos:
        summary: dicionário com agregações calculadas. Espera-se as chaves:
            - 'pond_id': str
            - 'pond_number': str
            - 'count': int
            - 'total_feed_kg': float
            - 'total_consumed_kg': float
            - 'avg_consumption_rate': float | None
            - 'last_date': str | None (ISO)
    """
    summary: Dict[str, Any]

class GenerateAnalyticsUseCase:
    """
    Agrega os últimos registros de consumo de um viveiro.
    """

    def __init__(self, pond_repo: IPondRepository, intake_repo: IFeedIntakeRepository) -> None:
        """
        Injeta dependências de viveiros e de registros de consumo.
        """
        self.pond_repo = pond_repo
        self.intake_repo = intake_repo

    def execute(self, pond_id: str, last_n: int = 50) -> AnalyticsResult:
        """
        Executa a agregação para um viveiro.

        Args:
            pond_id: Identificador do viveiro alvo.
            last_n: Quantidade de registros recentes a considerar (default=50).

        Raises:
            ValueError: viveiro inexistente.
        """
        pond = self.pond_repo.get(pond_id)
        if not pond:
            raise ValueError(f"Viveiro {pond_id} não encontrado")

        records: Iterable[FeedIntakeRecord] = self.intake_repo.list_for_pond(pond_id, last_n)
        records = list(records)

        rates = [r.consumption_rate_pct for r in records]
        summary = {
            "pond_id": pond_id,
            "pond_number": pond.pond_number,
            "count": len(records),
            "total_feed_kg": round(sum(r.feed_amount_kg for r in records), 2),
            "total_consumed_kg": round(sum(r.consumed_kg for r in records), 2),
            # None se não houver registros (evita StatisticsError)
            "avg_consumption_rate": round(mean(rates), 2) if rates else None,
            "last_date": max(r.date for r in records).isoformat() if records else None,
        }
        log.info("analytics_generated pond=%s count=%s", pond_id, summary["count"])
        return AnalyticsResult(summary=summary)
