# src/domain/repositories/feeding_record_repository.py
from __future__ import annotations
from typing import Protocol, List
from src.domain.entities.feeding_record import PondFeedingRecord

class IFeedingRecordRepository(Protocol):
    """
    Contrato de repositório para o caderno de trato.
    Registros são chaveados pelo id; gravar o mesmo id substitui o anterior.
    """

    def add(self, record: PondFeedingRecord) -> None:
        """Insere ou substitui o registro."""
        ...

    def list_all(self) -> List[PondFeedingRecord]:
        """Todos os registros, do mais recente (data) para o mais antigo."""
        ...

    def delete(self, record_id: str) -> None:
        """Remove um registro. Id inexistente é ignorado."""
        ...

    def clear(self) -> None:
        """Apaga todos os registros."""
        ...
