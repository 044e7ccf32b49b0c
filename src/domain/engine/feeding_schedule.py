# src/domain/engine/feeding_schedule.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from src.domain.entities.feeding_schedule import FeedingSchedule


# ============================
# Fases de arraçoamento
# ============================
@dataclass(frozen=True)
class FeedingStage:
    """
    Faixa etária e a especificação de ração correspondente.

    Atributos:
        max_age_days: Idade máxima (inclusive) da fase; None = sem teto.
        feeding_rate: Fração do peso vivo ofertada por dia.
        protein_pct: Proteína bruta da ração (%).
        feed_size_mm: Granulometria (mm).
        feed_type: Rótulo da ração.
        feeding_times: Horários dos tratos.
        application_method: Forma de oferta.
    """
    max_age_days: Optional[float]
    feeding_rate: float
    protein_pct: float
    feed_size_mm: float
    feed_type: str
    feeding_times: Tuple[str, ...]
    application_method: str

    def covers(self, age_days: float) -> bool:
        return self.max_age_days is None or age_days <= self.max_age_days


FEEDING_STAGES: Tuple[FeedingStage, ...] = (
    # pós-larva a juvenil
    FeedingStage(30, 0.08, 40, 0.5, "Ração triturada de alta proteína",
                 ("06:00", "10:00", "14:00", "18:00", "22:00"), "Distribuição a lanço uniforme"),
    # juvenil
    FeedingStage(60, 0.06, 35, 1.0, "Ração peletizada para camarão",
                 ("06:00", "12:00", "18:00", "22:00"), "Bandeja de alimentação + lanço"),
    # engorda
    FeedingStage(90, 0.04, 30, 2.0, "Ração de crescimento padrão",
                 ("06:00", "14:00", "22:00"), "Monitoramento por bandeja"),
    # terminação
    FeedingStage(None, 0.03, 25, 3.0, "Ração de terminação",
                 ("06:00", "18:00"), "Bandeja com monitoramento cuidadoso"),
)


# ============================
# Modelo de biomassa
# ============================
# Unidades de área por hectare usadas na contagem de indivíduos
AREA_FACTOR = 10_000
MIN_SURVIVAL_FRACTION = 0.5
SURVIVAL_DECAY_PER_DAY = 0.002


def individual_weight_g(age_days: float) -> float:
    """
    Peso médio de um camarão (g) por idade, em quatro retas contínuas:
    <30: 0,5 + 0,05·d | <60: 2 + 0,2·(d−30) | <90: 8 + 0,3·(d−60) | ≥90: 17 + 0,2·(d−90)
    """
    if age_days < 30:
        return 0.5 + age_days * 0.05
    if age_days < 60:
        return 2 + (age_days - 30) * 0.2
    if age_days < 90:
        return 8 + (age_days - 60) * 0.3
    return 17 + (age_days - 90) * 0.2


def survival_fraction(age_days: float) -> float:
    """Sobrevivência acumulada: cai 0,2% ao dia, com piso de 50%."""
    return max(MIN_SURVIVAL_FRACTION, 1 - age_days * SURVIVAL_DECAY_PER_DAY)


def estimate_biomass_kg(age_days: float, pond_size_ha: float, stocking_density: float) -> float:
    """
    Biomassa total estimada (kg).

    A densidade é cadastrada "por acre" mas multiplicada pelo fator de área
    por hectare; a fórmula é mantida assim para não mudar os planos já usados.
    """
    total_prawns = pond_size_ha * AREA_FACTOR * stocking_density * survival_fraction(age_days)
    return total_prawns * individual_weight_g(age_days) / 1000


def stage_for_age(age_days: float) -> FeedingStage:
    for stage in FEEDING_STAGES:
        if stage.covers(age_days):
            return stage
    return FEEDING_STAGES[-1]


def calculate_feeding_schedule(
    prawn_age_days: float,
    pond_size_ha: float,
    stocking_density: float,
) -> FeedingSchedule:
    """
    Plano diário a partir da idade, área e densidade de estocagem.

    Sem validação aqui: entradas ≤ 0 produzem números sem sentido, mas nunca
    exceção. Quem chama (caso de uso / formulário) valida antes.
    """
    stage = stage_for_age(prawn_age_days)
    biomass = estimate_biomass_kg(prawn_age_days, pond_size_ha, stocking_density)
    return FeedingSchedule(
        daily_amount_kg=round(biomass * stage.feeding_rate, 2),
        feeding_times=stage.feeding_times,
        protein_content_pct=stage.protein_pct,
        feed_type=stage.feed_type,
        feed_size_mm=stage.feed_size_mm,
        application_method=stage.application_method,
    )


# ============================
# Ajuste pelo clima
# ============================
def weather_feeding_advice(temperature_c: float, rainfall_mm: float) -> str:
    """Orientação única de arraçoamento para o clima do dia (primeira regra que casar)."""
    if temperature_c > 35:
        return "Reduza a ração em 20% e alimente nos horários mais frescos (início da manhã e fim da tarde)."
    if temperature_c < 22:
        return "Reduza a ração em 30%: o metabolismo cai com a temperatura baixa."
    if rainfall_mm > 50:
        return "Suspenda temporariamente os tratos se a chuva forte comprometer a qualidade da água."
    if 28 <= temperature_c <= 32:
        return "Temperatura na faixa ideal: mantenha o cronograma normal de tratos."
    return "Cronograma normal de tratos. Acompanhe o consumo nas bandejas."
