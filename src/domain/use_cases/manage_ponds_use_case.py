# src/domain/use_cases/manage_ponds_use_case.py
from __future__ import annotations
import logging

from src.domain.entities.pond import Pond
from src.domain.enums import AreaUnit, PondStatus
from src.domain.repositories.pond_repository import IPondRepository

log = logging.getLogger("camarao.usecases.ponds")

class RegisterPondUseCase:
    """
    Cadastra um viveiro novo (id gerado). A validação fica no __post_init__ de Pond.
    """

    def __init__(self, pond_repo: IPondRepository) -> None:
        self.pond_repo = pond_repo

    def execute(self, pond_number: str, size: float, uom: AreaUnit = AreaUnit.HECTARES,
                feeding_type: str = "", status: PondStatus = PondStatus.ACTIVE) -> Pond:
        """
        Raises:
            ValueError: número vazio ou área ≤ 0.
        """
        pond = Pond.create(pond_number, size, uom, feeding_type, status)
        self.pond_repo.add(pond)
        log.info("pond_registered id=%s number=%s size_ha=%.3f", pond.id, pond.pond_number, pond.size_ha)
        return pond

class DeletePondUseCase:
    """
    Remove um viveiro e, junto, os registros de consumo dele.
    O repositório apaga os dois numa única transação.
    """

    def __init__(self, pond_repo: IPondRepository) -> None:
        self.pond_repo = pond_repo

    def execute(self, pond_id: str) -> int:
        """
        Returns:
            Quantidade de registros de consumo apagados.

        Raises:
            ValueError: viveiro inexistente.
        """
        if not self.pond_repo.get(pond_id):
            raise ValueError(f"Viveiro {pond_id} não encontrado")
        removed = self.pond_repo.delete(pond_id)
        log.info("pond_deleted id=%s intake_removed=%d", pond_id, removed)
        return removed
