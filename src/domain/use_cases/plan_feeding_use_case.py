# src/domain/use_cases/plan_feeding_use_case.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import math

from src.domain.engine.feeding_schedule import (
    calculate_feeding_schedule, estimate_biomass_kg, weather_feeding_advice,
)
from src.domain.entities.feeding_schedule import FeedingSchedule
from src.domain.repositories.pond_repository import IPondRepository
from src.domain.value_objects import WeatherReading

log = logging.getLogger("camarao.usecases.feeding")

@dataclass(frozen=True)
class FeedingPlanResult:
    """
    DTO imutável com o plano de arraçoamento.
    """
    pond_id: str
    biomass_kg: float
    schedule: FeedingSchedule
    weather_advice: Optional[str]

class PlanFeedingUseCase:
    """
    Calcula o plano diário de ração de um viveiro cadastrado:
    - valida idade e densidade (o motor não valida nada)
    - usa a área do viveiro em hectares
    - anexa a orientação do clima quando houver leitura
    """

    def __init__(self, pond_repo: IPondRepository) -> None:
        self.pond_repo = pond_repo

    def execute(self, pond_id: str, prawn_age_days: float, stocking_density: float,
                weather: Optional[WeatherReading] = None) -> FeedingPlanResult:
        """
        Args:
            pond_id: Identificador do viveiro.
            prawn_age_days: Dias de cultivo (≥ 0).
            stocking_density: Pós-larvas estocadas por unidade de área (> 0).
            weather: Clima atual (opcional).

        Raises:
            ValueError: viveiro inexistente ou parâmetros inválidos.
        """
        pond = self.pond_repo.get(pond_id)
        if not pond:
            raise ValueError(f"Viveiro {pond_id} não encontrado")
        if not math.isfinite(prawn_age_days) or prawn_age_days < 0:
            raise ValueError("Idade dos camarões deve ser ≥ 0 dias.")
        if not math.isfinite(stocking_density) or stocking_density <= 0:
            raise ValueError("Densidade de estocagem deve ser > 0.")

        schedule = calculate_feeding_schedule(prawn_age_days, pond.size_ha, stocking_density)
        biomass = round(estimate_biomass_kg(prawn_age_days, pond.size_ha, stocking_density), 2)
        advice = (weather_feeding_advice(weather.temperature_c, weather.rainfall_mm)
                  if weather else None)

        log.info("feeding_plan pond=%s age=%s biomass=%.2f daily=%.2f times=%d",
                 pond_id, prawn_age_days, biomass, schedule.daily_amount_kg, schedule.feedings_per_day)

        return FeedingPlanResult(pond_id=pond_id, biomass_kg=biomass,
                                 schedule=schedule, weather_advice=advice)
