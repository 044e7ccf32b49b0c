# tests/unit/test_use_cases.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional
from datetime import date
import json

import pytest

from src.domain.entities.feed_intake import FeedIntakeRecord
from src.domain.entities.feeding_record import PondFeedingRecord
from src.domain.entities.pond import HECTARES_PER_ACRE, Pond
from src.domain.enums import AreaUnit, GrowthRate, PondStatus, RiskLevel
from src.domain.value_objects import WeatherReading

from src.domain.repositories.feed_intake_repository import IFeedIntakeRepository
from src.domain.repositories.feeding_record_repository import IFeedingRecordRepository
from src.domain.repositories.pond_repository import IPondRepository

from src.domain.engine.feeding_schedule import calculate_feeding_schedule
from src.domain.use_cases.feeding_log_use_case import FeedingLogUseCase
from src.domain.use_cases.generate_analytics_use_case import GenerateAnalyticsUseCase
from src.domain.use_cases.manage_ponds_use_case import DeletePondUseCase, RegisterPondUseCase
from src.domain.use_cases.monitor_weather_use_case import MonitorWeatherUseCase
from src.domain.use_cases.plan_feeding_use_case import PlanFeedingUseCase
from src.domain.use_cases.predict_ponds_use_case import PredictPondsUseCase
from src.domain.use_cases.record_feed_intake_use_case import RecordFeedIntakeUseCase

# ---------- Fakes em memória ----------

class FakePondRepo(IPondRepository):
    def __init__(self, *ponds: Pond, intake: Optional["FakeIntakeRepo"] = None) -> None:
        self.store: Dict[str, Pond] = {p.id: p for p in ponds}
        self.intake = intake
    def get(self, pond_id: str) -> Optional[Pond]:
        return self.store.get(pond_id)
    def list_all(self) -> Iterable[Pond]:
        return list(self.store.values())
    def add(self, pond: Pond) -> None:
        self.store[pond.id] = pond
    def delete(self, pond_id: str) -> int:
        self.store.pop(pond_id, None)
        return self.intake.delete_for_pond(pond_id) if self.intake else 0

class FakeIntakeRepo(IFeedIntakeRepository):
    def __init__(self) -> None:
        self.store: List[FeedIntakeRecord] = []
    def add(self, record: FeedIntakeRecord) -> None:
        self.store.append(record)
    def list_for_pond(self, pond_id: str, limit: int = 100) -> Iterable[FeedIntakeRecord]:
        items = [r for r in self.store if r.pond_id == pond_id]
        return sorted(items, key=lambda r: r.date, reverse=True)[:limit]
    def delete_for_pond(self, pond_id: str) -> int:
        before = len(self.store)
        self.store = [r for r in self.store if r.pond_id != pond_id]
        return before - len(self.store)

class FakeFeedingRecordRepo(IFeedingRecordRepository):
    def __init__(self) -> None:
        self.store: Dict[str, PondFeedingRecord] = {}
    def add(self, record: PondFeedingRecord) -> None:
        self.store[record.id] = record
    def list_all(self) -> List[PondFeedingRecord]:
        return sorted(self.store.values(), key=lambda r: r.date, reverse=True)
    def delete(self, record_id: str) -> None:
        self.store.pop(record_id, None)
    def clear(self) -> None:
        self.store.clear()

OTIMO = WeatherReading(29.0, 50.0, 0.0)

# ---------- Previsões ----------

def test_previsao_usa_media_dos_registros_quando_existem():
    ponds = FakePondRepo(Pond("1", "V1", 1.0), Pond("2", "V2", 1.0))
    intake = FakeIntakeRepo()
    intake.add(FeedIntakeRecord("1", 10, 9.8, date=date(2024, 1, 1)))
    intake.add(FeedIntakeRecord("1", 10, 9.8, date=date(2024, 1, 2)))

    res = PredictPondsUseCase(ponds, intake).execute(OTIMO)

    assert res.sources == {"1": "registrado", "2": "estimado"}
    assert res.consumption_rates["1"] == 98.0
    assert res.consumption_rates["2"] == 78.0
    # 98% de consumo: FCR cai mais 0,2 e a despesca antecipa 8 dias
    assert res.predictions["1"].days_to_harvest == 107
    assert res.predictions["2"].days_to_harvest == 115

def test_previsao_ignora_viveiros_inativos():
    ponds = FakePondRepo(Pond("1", "V1", 1.0), Pond("2", "V2", 1.0, status=PondStatus.INACTIVE))
    res = PredictPondsUseCase(ponds, FakeIntakeRepo()).execute(OTIMO)
    assert set(res.predictions) == {"1"}

def test_previsao_considera_so_os_ultimos_registros():
    ponds = FakePondRepo(Pond("1", "V1", 1.0))
    intake = FakeIntakeRepo()
    intake.add(FeedIntakeRecord("1", 10, 2, date=date(2024, 1, 1)))   # 20%, antigo
    intake.add(FeedIntakeRecord("1", 10, 9, date=date(2024, 1, 5)))   # 90%

    res = PredictPondsUseCase(ponds, intake, history_n=1).execute(OTIMO)
    assert res.consumption_rates["1"] == 90.0
    assert res.predictions["1"].risk_level is RiskLevel.LOW

def test_previsao_viveiro_em_acres_pequeno_sobe_risco():
    ponds = FakePondRepo(Pond("1", "V1", 1.0, uom=AreaUnit.ACRES))  # ~0,40 ha
    res = PredictPondsUseCase(ponds, FakeIntakeRepo()).execute(OTIMO)
    assert res.predictions["1"].risk_level is RiskLevel.MEDIUM
    assert res.predictions["1"].growth_rate is GrowthRate.ACCELERATED

# ---------- Arraçoamento ----------

def test_plano_de_trato_converte_acres():
    ponds = FakePondRepo(Pond("1", "V1", 2.0, uom=AreaUnit.ACRES))
    res = PlanFeedingUseCase(ponds).execute("1", 45, 40_000)

    esperado = calculate_feeding_schedule(45, 2.0 * HECTARES_PER_ACRE, 40_000)
    assert res.schedule == esperado
    assert res.weather_advice is None

def test_plano_de_trato_com_clima():
    ponds = FakePondRepo(Pond("1", "V1", 1.0))
    res = PlanFeedingUseCase(ponds).execute("1", 100, 20_000, weather=WeatherReading(36, 50, 0))
    assert res.weather_advice.startswith("Reduza a ração em 20%")
    assert res.schedule.feeding_times == ("06:00", "18:00")
    assert res.biomass_kg > 0

@pytest.mark.parametrize("pond_id,age,density", [
    ("x", 45, 40_000),
    ("1", -1, 40_000),
    ("1", 45, 0),
    ("1", float("nan"), 40_000),
])
def test_plano_de_trato_invalido(pond_id, age, density):
    ponds = FakePondRepo(Pond("1", "V1", 1.0))
    with pytest.raises(ValueError):
        PlanFeedingUseCase(ponds).execute(pond_id, age, density)

# ---------- Cadastro / consumo ----------

def test_cadastrar_e_remover_viveiro_apaga_consumo():
    intake = FakeIntakeRepo()
    ponds = FakePondRepo(intake=intake)
    pond = RegisterPondUseCase(ponds).execute("Viveiro 4", 1.2, feeding_type="Padrão")
    assert ponds.get(pond.id) == pond

    uc = RecordFeedIntakeUseCase(ponds, intake)
    uc.execute(pond.id, 10, 8)
    uc.execute(pond.id, 10, 7)

    removed = DeletePondUseCase(ponds).execute(pond.id)
    assert removed == 2
    assert ponds.get(pond.id) is None
    assert intake.store == []

def test_remover_viveiro_inexistente():
    with pytest.raises(ValueError, match="não encontrado"):
        DeletePondUseCase(FakePondRepo()).execute("99")

def test_cadastro_invalido_nao_persiste():
    ponds = FakePondRepo()
    with pytest.raises(ValueError):
        RegisterPondUseCase(ponds).execute("V1", 0)
    assert ponds.store == {}

def test_registro_de_consumo():
    ponds, intake = FakePondRepo(Pond("1", "V1", 1.0)), FakeIntakeRepo()
    rec = RecordFeedIntakeUseCase(ponds, intake).execute("1", 20, 15, notes="  sobras na bandeja ")
    assert rec.consumption_rate_pct == 75.0
    assert rec.notes == "sobras na bandeja"
    assert intake.store == [rec]

@pytest.mark.parametrize("pond_id,feed,consumed", [("", 10, 5), ("9", 10, 5), ("1", 10, 12), ("1", 0, 0)])
def test_registro_de_consumo_invalido(pond_id, feed, consumed):
    ponds, intake = FakePondRepo(Pond("1", "V1", 1.0)), FakeIntakeRepo()
    with pytest.raises(ValueError):
        RecordFeedIntakeUseCase(ponds, intake).execute(pond_id, feed, consumed)
    assert intake.store == []

# ---------- Análises ----------

def test_resumo_de_consumo():
    ponds, intake = FakePondRepo(Pond("1", "V1", 1.0)), FakeIntakeRepo()
    intake.add(FeedIntakeRecord("1", 10, 8, date=date(2024, 2, 1)))
    intake.add(FeedIntakeRecord("1", 20, 10, date=date(2024, 2, 3)))

    s = GenerateAnalyticsUseCase(ponds, intake).execute("1").summary
    assert s["count"] == 2
    assert s["total_feed_kg"] == 30
    assert s["total_consumed_kg"] == 18
    assert s["avg_consumption_rate"] == 65.0
    assert s["last_date"] == "2024-02-03"

def test_resumo_sem_registros():
    ponds = FakePondRepo(Pond("1", "V1", 1.0))
    s = GenerateAnalyticsUseCase(ponds, FakeIntakeRepo()).execute("1").summary
    assert s["count"] == 0
    assert s["avg_consumption_rate"] is None
    assert s["last_date"] is None

# ---------- Clima ----------

def test_monitor_de_clima():
    uc = MonitorWeatherUseCase(lambda: WeatherReading(36.0, 50.0, 0.0))
    rep = uc.execute()
    assert rep.has_high_severity
    assert rep.feeding_advice.startswith("Reduza a ração em 20%")
    assert len(rep.care) == 2

def test_monitor_de_clima_tranquilo():
    rep = MonitorWeatherUseCase(lambda: WeatherReading(25.0, 50.0, 10.0)).execute()
    assert rep.care == []
    assert not rep.has_high_severity

# ---------- Caderno de trato ----------

def test_caderno_de_trato_ordem_e_exportacao():
    uc = FeedingLogUseCase(FakeFeedingRecordRepo())
    antigo = PondFeedingRecord("V1", "Ração A", 5.0, date=date(2024, 1, 1), id="a")
    novo = PondFeedingRecord("V2", "Ração B", 7.5, date=date(2024, 1, 2), id="b")
    uc.add(antigo)
    lista = uc.add(novo)
    assert [r.id for r in lista] == ["b", "a"]

    exp = uc.export_json(today=date(2024, 1, 3))
    assert exp.filename == "prawn-feeding-records-2024-01-03.json"
    data = json.loads(exp.content)
    assert [d["id"] for d in data] == ["b", "a"]
    assert data[0]["feedAmount"] == 7.5
    assert "\n  " in exp.content

def test_caderno_de_trato_substitui_apaga_e_limpa():
    uc = FeedingLogUseCase(FakeFeedingRecordRepo())
    uc.add(PondFeedingRecord("V1", "Ração A", 5.0, id="a"))
    lista = uc.add(PondFeedingRecord("V1", "Ração A", 6.0, id="a"))
    assert len(lista) == 1 and lista[0].feed_amount == 6.0

    uc.add(PondFeedingRecord("V2", "Ração B", 1.0, id="b"))
    assert [r.id for r in uc.delete("a")] == ["b"]
    uc.clear()
    assert uc.list_records() == []
    assert json.loads(uc.export_json().content) == []
