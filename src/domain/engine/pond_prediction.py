# src/domain/engine/pond_prediction.py
"""
Motor de previsão de desempenho por viveiro.

Parte das condições ótimas (crescimento normal, 90% de sobrevivência,
120 dias até a despesca, FCR 1,6, risco baixo) e aplica cinco etapas
independentes, sempre na mesma ordem:

    temperatura → chuva → umidade → consumo de ração → área do viveiro

Cada etapa altera o acumulador e, quando dispara, anexa exatamente uma
orientação de manejo. No final a sobrevivência é limitada a [50, 95] e o
FCR a [1,3; 3,0] (2 casas). Crescimento e risco NÃO são recalculados a partir
dos números finais.

O risco só sobe ao longo das etapas; a única descida possível é a da etapa
de área (viveiro > 3 ha).

Funções puras: nada de I/O, estado global ou aleatoriedade.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from src.domain.entities.pond import PondSnapshot
from src.domain.entities.pond_prediction import PondPrediction
from src.domain.enums import GrowthRate, RiskLevel


# ============================
# Tabela de regras
# ============================
BASE_SURVIVAL_PCT = 90.0
BASE_DAYS_TO_HARVEST = 120
BASE_FCR = 1.6

SURVIVAL_RANGE: Tuple[float, float] = (50.0, 95.0)
FCR_RANGE: Tuple[float, float] = (1.3, 3.0)

# Consumo estimado quando o viveiro não tem registros de trato
SAMPLE_CONSUMPTION_RANGE: Tuple[float, float] = (60.0, 95.0)
SAMPLE_CONSUMPTION_BASE = 80.0
SAMPLE_OPTIMAL_TEMP_C = 28.0
SAMPLE_PENALTY_PER_DEGREE = 2.0

LARGE_POND_HA = 3.0
SMALL_POND_HA = 0.5

MSG_TEMP_EXTREME = ("Temperatura extrema está afetando criticamente a saúde dos camarões. "
                    "Aumente a aeração imediatamente.")
MSG_TEMP_HIGH = ("Temperatura alta está retardando o crescimento. "
                 "Considere aeração extra e tratos nos horários mais frescos.")
MSG_TEMP_OPTIMAL = "Temperatura na faixa ótima para crescimento. Mantenha as condições atuais."
MSG_TEMP_LOW = ("Temperatura baixa está reduzindo o metabolismo. "
                "Diminua a ração para evitar desperdício.")
MSG_RAIN_HEAVY = ("Chuva forte está afetando a qualidade da água. "
                  "Monitore o pH e ajuste a ração.")
MSG_RAIN_MODERATE = ("Chuva moderada pode alterar os parâmetros da água. "
                     "Verifique a qualidade da água com frequência.")
MSG_HUMID_HOT = ("Umidade alta com temperatura alta pode reduzir o oxigênio dissolvido. "
                 "Considere aeração adicional.")
MSG_HUMID_LOW = "Umidade baixa pode aumentar a evaporação. Monitore o nível da água."
MSG_INTAKE_LOW = ("Consumo baixo de ração indica possível estresse ou problema sanitário. "
                  "Verifique a água e a saúde dos camarões.")
MSG_INTAKE_HIGH = "Consumo excelente. Considere aumentar a ração gradualmente."
MSG_POND_LARGE = ("Viveiro grande amortece as variações do ambiente. "
                  "Garanta boa circulação de água em toda a área.")
MSG_POND_SMALL = ("Viveiro pequeno sofre variações rápidas nos parâmetros. "
                  "Monitore com mais frequência.")


class PondState(Protocol):
    """Área (ha) e taxa de consumo (%) do viveiro avaliado."""
    size_ha: float
    consumption_rate_pct: float


class PondLike(Protocol):
    """Viveiro cadastrado, sem dados de consumo."""
    id: str
    size_ha: float


# ============================
# Acumulador
# ============================
@dataclass(frozen=True)
class _Entrada:
    temperature: float
    humidity: float
    rainfall: float
    pond: PondState


@dataclass
class _Acumulado:
    """Totais correntes de uma avaliação. Vive só dentro de uma chamada."""
    growth: GrowthRate = GrowthRate.NORMAL
    survival: float = BASE_SURVIVAL_PCT
    days: int = BASE_DAYS_TO_HARVEST
    fcr: float = BASE_FCR
    risk: RiskLevel = RiskLevel.LOW
    notes: List[str] = field(default_factory=list)

    def ajustar(self, survival: float = 0.0, days: int = 0, fcr: float = 0.0,
                nota: Optional[str] = None) -> None:
        self.survival += survival
        self.days += days
        self.fcr += fcr
        if nota:
            self.notes.append(nota)


def _clamp(x: float, lo: float, hi: float) -> float:
    """Limita x ao intervalo [lo, hi]."""
    return float(max(lo, min(hi, x)))


# ============================
# Etapas (ordem fixa)
# ============================
def _etapa_temperatura(acc: _Acumulado, e: _Entrada) -> None:
    t = e.temperature
    if t > 35:
        acc.growth = GrowthRate.SEVERELY_REDUCED
        acc.risk = RiskLevel.CRITICAL
        acc.ajustar(-15, 20, 0.4, MSG_TEMP_EXTREME)
    elif t > 32:
        acc.growth = GrowthRate.REDUCED
        acc.risk = acc.risk.at_least(RiskLevel.HIGH)
        acc.ajustar(-8, 10, 0.2, MSG_TEMP_HIGH)
    elif 28 <= t <= 30:
        acc.growth = GrowthRate.ACCELERATED
        acc.ajustar(3, -5, -0.1, MSG_TEMP_OPTIMAL)
    elif t < 24:
        acc.growth = GrowthRate.REDUCED
        acc.risk = acc.risk.at_least(RiskLevel.HIGH)
        acc.ajustar(-5, 15, 0.3, MSG_TEMP_LOW)
    # 24 ≤ t < 28 e 30 < t ≤ 32: sem ajuste


def _etapa_chuva(acc: _Acumulado, e: _Entrada) -> None:
    r = e.rainfall
    if r > 60:
        acc.risk = acc.risk.at_least(RiskLevel.HIGH)
        acc.ajustar(-10, 15, 0.3, MSG_RAIN_HEAVY)
    elif r > 30:
        acc.risk = acc.risk.at_least(RiskLevel.MEDIUM)
        acc.ajustar(-5, 5, 0.1, MSG_RAIN_MODERATE)


def _etapa_umidade(acc: _Acumulado, e: _Entrada) -> None:
    if e.humidity > 90 and e.temperature > 30:
        acc.risk = acc.risk.at_least(RiskLevel.MEDIUM)
        acc.ajustar(-7, 8, 0.2, MSG_HUMID_HOT)
    elif e.humidity < 30:
        acc.ajustar(-3, nota=MSG_HUMID_LOW)


def _etapa_consumo(acc: _Acumulado, e: _Entrada) -> None:
    c = e.pond.consumption_rate_pct
    if c < 60:
        acc.risk = acc.risk.at_least(RiskLevel.MEDIUM)
        acc.ajustar(days=10, fcr=0.4, nota=MSG_INTAKE_LOW)
    elif c > 95:
        acc.growth = acc.growth.step_up()
        acc.ajustar(days=-8, fcr=-0.2, nota=MSG_INTAKE_HIGH)


def _etapa_area(acc: _Acumulado, e: _Entrada) -> None:
    size = e.pond.size_ha
    if size > LARGE_POND_HA:
        acc.risk = acc.risk.step_down()
        acc.notes.append(MSG_POND_LARGE)
    elif size < SMALL_POND_HA:
        acc.risk = acc.risk.step_up()
        acc.notes.append(MSG_POND_SMALL)


STAGES: Tuple[Callable[[_Acumulado, _Entrada], None], ...] = (
    _etapa_temperatura,
    _etapa_chuva,
    _etapa_umidade,
    _etapa_consumo,
    _etapa_area,
)


# ============================
# API pública
# ============================
def calculate_pond_prediction(
    temperature_c: float,
    humidity_pct: float,
    rainfall_mm: float,
    pond: PondState,
) -> PondPrediction:
    """
    Avalia um viveiro sob o clima informado.

    Args:
        temperature_c: Temperatura do ar (°C).
        humidity_pct: Umidade relativa (%).
        rainfall_mm: Chuva (mm).
        pond: Objeto com `size_ha` e `consumption_rate_pct`.

    Returns:
        PondPrediction novo. Não levanta exceções para nenhuma entrada numérica.
    """
    entrada = _Entrada(temperature_c, humidity_pct, rainfall_mm, pond)
    acc = _Acumulado()
    for etapa in STAGES:
        etapa(acc, entrada)

    return PondPrediction(
        growth_rate=acc.growth,
        survival_rate_pct=_clamp(acc.survival, *SURVIVAL_RANGE),
        days_to_harvest=acc.days,
        fcr=round(_clamp(acc.fcr, *FCR_RANGE), 2),
        risk_level=acc.risk,
        recommendations=tuple(acc.notes),
    )


def sample_consumption_rate(temperature_c: float) -> float:
    """
    Taxa de consumo estimada (%) para viveiros sem registros:
    80 menos 2 pontos por grau de distância de 28 °C, limitada a [60, 95].
    """
    raw = SAMPLE_CONSUMPTION_BASE - abs(temperature_c - SAMPLE_OPTIMAL_TEMP_C) * SAMPLE_PENALTY_PER_DEGREE
    return _clamp(raw, *SAMPLE_CONSUMPTION_RANGE)


def generate_pond_predictions(
    temperature_c: float,
    humidity_pct: float,
    rainfall_mm: float,
    ponds: Iterable[PondLike],
) -> Dict[str, PondPrediction]:
    """
    Gera uma previsão por viveiro usando a taxa de consumo estimada.

    Returns:
        dict {pond.id: PondPrediction}, uma entrada por id.
    """
    rate = sample_consumption_rate(temperature_c)
    return {
        p.id: calculate_pond_prediction(
            temperature_c, humidity_pct, rainfall_mm,
            PondSnapshot(p.id, p.size_ha, rate),
        )
        for p in ponds
    }
