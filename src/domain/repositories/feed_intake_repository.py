# define como salvar/buscar os registros de consumo mas nao onde
# src/domain/repositories/feed_intake_repository.py
from __future__ import annotations
from typing import Protocol, Iterable
from src.domain.entities.feed_intake import FeedIntakeRecord

class IFeedIntakeRepository(Protocol):
    """Persistência dos registros de consumo de ração.

    Este protocolo define **como** os registros devem ser manipulados
    (métodos/assinaturas), sem impor a tecnologia de armazenamento.
    """

    def add(self, record: FeedIntakeRecord) -> None:
        """Persiste um registro já validado pelo domínio."""
        ...

    def list_for_pond(self, pond_id: str, limit: int = 100) -> Iterable[FeedIntakeRecord]:
        """Lista registros de um viveiro, do mais recente para o mais antigo.

        Args:
            pond_id: Identificador do viveiro.
            limit: Quantidade máxima de registros a retornar.
        """
        ...
