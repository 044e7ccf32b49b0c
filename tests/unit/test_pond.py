import pytest
from datetime import date

from src.domain.entities.feed_intake import FeedIntakeRecord
from src.domain.entities.feeding_record import PondFeedingRecord
from src.domain.entities.pond import HECTARES_PER_ACRE, Pond
from src.domain.enums import AreaUnit, PondStatus
from src.domain.value_objects import WeatherReading


def test_area_em_acres_convertida_para_hectares():
    p = Pond("1", "Viveiro 1", 10, uom=AreaUnit.ACRES)
    assert p.size_ha == pytest.approx(10 * HECTARES_PER_ACRE)
    assert p.to_dict()["size_ha"] == 4.047


def test_create_gera_id_e_limpa_texto():
    p = Pond.create("  Viveiro 9 ", 1.5, feeding_type=" Premium ")
    assert p.id and len(p.id) == 32
    assert p.pond_number == "Viveiro 9"
    assert p.feeding_type == "Premium"
    assert p.is_active


def test_viveiro_inativo():
    p = Pond("1", "V1", 1.0, status=PondStatus.MAINTENANCE)
    assert not p.is_active
    assert p.to_dict(consumption_rate_pct=80.0)["consumption_rate_pct"] == 80.0


@pytest.mark.parametrize("kwargs", [
    dict(id="", pond_number="V1", size=1.0),
    dict(id="1", pond_number="  ", size=1.0),
    dict(id="1", pond_number="V1", size=0.0),
    dict(id="1", pond_number="V1", size=float("nan")),
])
def test_viveiro_invalido(kwargs):
    with pytest.raises(ValueError):
        Pond(**kwargs)


def test_snapshot_usa_hectares():
    p = Pond("7", "V7", 2.0, uom=AreaUnit.ACRES)
    s = p.snapshot(75.0)
    assert s.id == "7"
    assert s.size_ha == pytest.approx(2 * HECTARES_PER_ACRE)
    assert s.consumption_rate_pct == 75.0


@pytest.mark.parametrize("consumido,faixa", [(90, "bom"), (80, "bom"), (65, "atencao"), (30, "ruim")])
def test_faixa_de_consumo(consumido, faixa):
    r = FeedIntakeRecord("1", feed_amount_kg=100, consumed_kg=consumido)
    assert r.consumption_rate_pct == pytest.approx(consumido)
    assert r.consumption_band() == faixa


@pytest.mark.parametrize("feed,consumed", [(0, 0), (-1, 0), (10, -1), (10, 11)])
def test_consumo_invalido(feed, consumed):
    with pytest.raises(ValueError):
        FeedIntakeRecord("1", feed_amount_kg=feed, consumed_kg=consumed)


def test_consumo_sem_viveiro():
    with pytest.raises(ValueError, match="Selecione um viveiro"):
        FeedIntakeRecord("", 10, 5)


def test_registro_de_trato_formato_de_exportacao():
    r = PondFeedingRecord("Viveiro 1", "Ração peletizada", 12.5, pond_size=2.5,
                          feeding_time="06:00", date=date(2024, 3, 1), id="abc")
    assert r.to_dict() == {
        "id": "abc", "pondName": "Viveiro 1", "pondSize": 2.5, "feedType": "Ração peletizada",
        "feedAmount": 12.5, "feedingTime": "06:00", "notes": "", "date": "2024-03-01",
    }


@pytest.mark.parametrize("kwargs", [
    dict(pond_name="", feed_type="x", feed_amount=1.0),
    dict(pond_name="V1", feed_type=" ", feed_amount=1.0),
    dict(pond_name="V1", feed_type="x", feed_amount=0.0),
    dict(pond_name="V1", feed_type="x", feed_amount=1.0, pond_size=-1.0),
    dict(pond_name="V1", feed_type="x", feed_amount=1.0, pond_size=float("nan")),
])
def test_registro_de_trato_invalido(kwargs):
    with pytest.raises(ValueError):
        PondFeedingRecord(**kwargs)


def test_leitura_de_clima_valida():
    w = WeatherReading(29.0, 70.0, 0.0)
    assert w.to_dict() == {"temperature": 29.0, "humidity": 70.0, "rainfall": 0.0}


@pytest.mark.parametrize("args", [
    (float("nan"), 50.0, 0.0),
    (29.0, 101.0, 0.0),
    (29.0, -1.0, 0.0),
    (29.0, 50.0, -0.5),
    (29.0, 50.0, float("inf")),
])
def test_leitura_de_clima_invalida(args):
    with pytest.raises(ValueError):
        WeatherReading(*args)
