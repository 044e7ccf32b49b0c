# src/domain/use_cases/predict_ponds_use_case.py
from __future__ import annotations
from dataclasses import dataclass
from statistics import mean
from typing import Dict, Literal
import logging

from config.settings import CONSUMPTION_HISTORY_N
from src.domain.engine.pond_prediction import calculate_pond_prediction, sample_consumption_rate
from src.domain.entities.pond_prediction import PondPrediction
from src.domain.repositories.feed_intake_repository import IFeedIntakeRepository
from src.domain.repositories.pond_repository import IPondRepository
from src.domain.value_objects import WeatherReading

log = logging.getLogger("camarao.usecases.predict")

ConsumptionSource = Literal["registrado", "estimado"]

@dataclass(frozen=True)
class PredictPondsResult:
    """
    DTO imutável com as previsões da rodada.

    Atributos:
        predictions: {pond_id: PondPrediction}, uma entrada por viveiro ativo.
        consumption_rates: taxa de consumo (%) usada para cada viveiro.
        sources: 'registrado' (média dos registros) ou 'estimado' (fórmula pela temperatura).
    """
    predictions: Dict[str, PondPrediction]
    consumption_rates: Dict[str, float]
    sources: Dict[str, ConsumptionSource]

class PredictPondsUseCase:
    """
    Gera a previsão de todos os viveiros ativos para o clima informado.
    - usa a média dos últimos registros de consumo quando existirem
    - senão estima o consumo pela distância da temperatura ótima
    """

    def __init__(self, pond_repo: IPondRepository, intake_repo: IFeedIntakeRepository,
                 history_n: int = CONSUMPTION_HISTORY_N) -> None:
        self.pond_repo = pond_repo
        self.intake_repo = intake_repo
        self.history_n = history_n

    def execute(self, weather: WeatherReading) -> PredictPondsResult:
        """
        Args:
            weather: Leitura do clima já validada.

        Returns:
            PredictPondsResult com previsões, taxas usadas e origem de cada taxa.
        """
        predictions: Dict[str, PondPrediction] = {}
        rates: Dict[str, float] = {}
        sources: Dict[str, ConsumptionSource] = {}

        for pond in self.pond_repo.list_all():
            if not pond.is_active:
                continue
            history = list(self.intake_repo.list_for_pond(pond.id, self.history_n))
            if history:
                rate = round(mean(r.consumption_rate_pct for r in history), 2)
                sources[pond.id] = "registrado"
            else:
                rate = sample_consumption_rate(weather.temperature_c)
                sources[pond.id] = "estimado"
            rates[pond.id] = rate

            predictions[pond.id] = calculate_pond_prediction(
                weather.temperature_c, weather.humidity_pct, weather.rainfall_mm,
                pond.snapshot(rate),
            )
            log.info("prediction pond=%s rate=%.2f src=%s risk=%s growth=%s",
                     pond.id, rate, sources[pond.id],
                     predictions[pond.id].risk_level.value, predictions[pond.id].growth_rate.value)

        return PredictPondsResult(predictions=predictions, consumption_rates=rates, sources=sources)
