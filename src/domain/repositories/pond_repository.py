# src/domain/repositories/pond_repository.py
from __future__ import annotations
from typing import Protocol, Optional, Iterable
from src.domain.entities.pond import Pond

class IPondRepository(Protocol):
    """
    Contrato de repositório para a entidade Pond.

    Implementações concretas devem fornecer busca por id, listagem e
    gravação sem impor a tecnologia de armazenamento (SQL, memória, etc.).
    """

    def get(self, pond_id: str) -> Optional[Pond]:
        """
        Recupera um Pond pelo identificador.

        Returns:
            Optional[Pond]: Instância se encontrado; None caso contrário.
        """
        ...

    def list_all(self) -> Iterable[Pond]:
        """Lista os viveiros cadastrados, na ordem de cadastro."""
        ...

    def add(self, pond: Pond) -> None:
        """Persiste um viveiro (substitui se o id já existir)."""
        ...

    def delete(self, pond_id: str) -> int:
        """Remove o viveiro e os registros de consumo dele, tudo ou nada.

        Returns:
            Quantidade de registros de consumo apagados (0 se o id não existir).
        """
        ...
