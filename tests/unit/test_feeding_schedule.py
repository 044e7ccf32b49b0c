import pytest

from src.domain.engine.feeding_schedule import (
    FEEDING_STAGES, calculate_feeding_schedule, estimate_biomass_kg,
    individual_weight_g, stage_for_age, survival_fraction, weather_feeding_advice,
)


@pytest.mark.parametrize("limite,peso", [(30, 2.0), (60, 8.0), (90, 17.0)])
def test_peso_continuo_nas_trocas_de_fase(limite, peso):
    assert individual_weight_g(limite) == pytest.approx(peso)
    assert individual_weight_g(limite - 1e-6) == pytest.approx(peso, abs=1e-5)


def test_peso_inicial_e_terminacao():
    assert individual_weight_g(0) == 0.5
    assert individual_weight_g(100) == pytest.approx(19.0)


def test_sobrevivencia_tem_piso_de_50_por_cento():
    assert survival_fraction(0) == 1.0
    assert survival_fraction(100) == pytest.approx(0.8)
    assert survival_fraction(250) == pytest.approx(0.5)
    assert survival_fraction(400) == 0.5


def test_fases_por_idade():
    assert stage_for_age(0) is FEEDING_STAGES[0]
    assert stage_for_age(30) is FEEDING_STAGES[0]
    assert stage_for_age(31) is FEEDING_STAGES[1]
    assert stage_for_age(60) is FEEDING_STAGES[1]
    assert stage_for_age(90) is FEEDING_STAGES[2]
    assert stage_for_age(91) is FEEDING_STAGES[3]


def test_biomassa_usa_fator_de_area_por_hectare():
    # 1 ha × 10 000 × 40 000 × 0,94 × 2 g
    assert estimate_biomass_kg(30, 1, 40_000) == pytest.approx(752_000.0)


def test_cronograma_dia_30():
    s = calculate_feeding_schedule(30, 1, 40_000)
    assert s.daily_amount_kg == pytest.approx(60_160.0)
    assert s.protein_content_pct == 40
    assert s.feed_size_mm == 0.5
    assert s.feedings_per_day == 5
    assert s.amount_per_feeding_kg == pytest.approx(12_032.0)


def test_troca_de_fase_reduz_taxa_de_8_para_6_por_cento():
    d30 = calculate_feeding_schedule(30, 1, 40_000)
    d31 = calculate_feeding_schedule(31, 1, 40_000)
    assert d31.daily_amount_kg < d30.daily_amount_kg
    assert d31.daily_amount_kg == pytest.approx(round(estimate_biomass_kg(31, 1, 40_000) * 0.06, 2))
    assert d31.feeding_times == ("06:00", "12:00", "18:00", "22:00")


def test_terminacao_dois_tratos():
    s = calculate_feeding_schedule(120, 2.0, 30_000)
    assert s.feeding_times == ("06:00", "18:00")
    assert s.protein_content_pct == 25
    assert s.feed_size_mm == 3.0


def test_escala_linear_com_area_e_densidade():
    a = calculate_feeding_schedule(45, 1, 10_000).daily_amount_kg
    b = calculate_feeding_schedule(45, 2, 10_000).daily_amount_kg
    c = calculate_feeding_schedule(45, 1, 20_000).daily_amount_kg
    assert b == pytest.approx(2 * a)
    assert c == pytest.approx(2 * a)


def test_entradas_invalidas_nao_levantam_excecao():
    s = calculate_feeding_schedule(-5, 0, 0)
    assert s.daily_amount_kg == 0


@pytest.mark.parametrize("temp,chuva,inicio", [
    (36, 80, "Reduza a ração em 20%"),
    (20, 80, "Reduza a ração em 30%"),
    (25, 60, "Suspenda temporariamente"),
    (30, 10, "Temperatura na faixa ideal"),
    (25, 10, "Cronograma normal"),
    (33, 10, "Cronograma normal"),
])
def test_orientacao_de_trato_pelo_clima(temp, chuva, inicio):
    assert weather_feeding_advice(temp, chuva).startswith(inicio)
