import sqlite3
from datetime import date

import pytest

from src.domain.entities.feed_intake import FeedIntakeRecord
from src.domain.entities.feeding_record import PondFeedingRecord
from src.domain.entities.pond import Pond
from src.domain.enums import AreaUnit, PondStatus
from src.domain.use_cases.manage_ponds_use_case import DeletePondUseCase
from src.infrastructure.database.migrations import (
    AVAILABLE_MIGRATIONS, get_executed_migrations, run_migrations,
)
from src.infrastructure.database.sqlite_repositories import (
    SQLiteFeedIntakeRepo, SQLiteFeedingRecordRepo, SQLitePondRepo,
)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "camaraosync.db"
    run_migrations(path)
    return path


def test_migrations_sao_idempotentes(tmp_path):
    path = tmp_path / "m.db"
    assert run_migrations(path) == list(AVAILABLE_MIGRATIONS)
    assert run_migrations(path) == []
    assert get_executed_migrations(path) == sorted(AVAILABLE_MIGRATIONS)


def test_migrations_sem_seed(tmp_path):
    path = tmp_path / "vazio.db"
    ran = run_migrations(path, seed=False)
    assert "007" not in ran
    assert "007" in get_executed_migrations(path)
    assert SQLitePondRepo(path).list_all() == []


def test_viveiros_de_exemplo(db_path):
    ponds = SQLitePondRepo(db_path).list_all()
    assert [(p.id, p.size, p.feeding_type) for p in ponds] == [
        ("1", 2.5, "Padrão"), ("2", 1.8, "Premium"), ("3", 3.2, "Orgânica"),
    ]
    assert all(p.is_active for p in ponds)


def test_viveiro_upsert_e_remocao(db_path):
    repo = SQLitePondRepo(db_path)
    p = Pond("x1", "Viveiro X", 5.0, uom=AreaUnit.ACRES, feeding_type="Padrão")
    repo.add(p)
    assert repo.get("x1") == p

    repo.add(Pond("x1", "Viveiro X", 5.0, uom=AreaUnit.ACRES, status=PondStatus.MAINTENANCE))
    assert repo.get("x1").status is PondStatus.MAINTENANCE
    assert len(repo.list_all()) == 4

    repo.delete("x1")
    assert repo.get("x1") is None


def test_consumo_mais_recente_primeiro(db_path):
    repo = SQLiteFeedIntakeRepo(db_path)
    repo.add(FeedIntakeRecord("1", 10, 8, date=date(2024, 1, 1), id="a"))
    repo.add(FeedIntakeRecord("1", 10, 9, date=date(2024, 1, 3), id="c"))
    repo.add(FeedIntakeRecord("1", 10, 7, date=date(2024, 1, 2), id="b"))
    repo.add(FeedIntakeRecord("2", 10, 5, date=date(2024, 1, 9), id="z"))

    assert [r.id for r in repo.list_for_pond("1")] == ["c", "b", "a"]
    assert [r.id for r in repo.list_for_pond("1", limit=2)] == ["c", "b"]
    assert repo.list_for_pond("1")[0].date == date(2024, 1, 3)


def test_remover_viveiro_com_consumo(db_path):
    ponds, intake = SQLitePondRepo(db_path), SQLiteFeedIntakeRepo(db_path)
    intake.add(FeedIntakeRecord("2", 10, 8))
    intake.add(FeedIntakeRecord("2", 10, 6))

    assert DeletePondUseCase(ponds).execute("2") == 2
    assert ponds.get("2") is None
    assert intake.list_for_pond("2") == []


def test_remocao_de_viveiro_e_tudo_ou_nada(db_path):
    ponds, intake = SQLitePondRepo(db_path), SQLiteFeedIntakeRepo(db_path)
    intake.add(FeedIntakeRecord("2", 10, 8, id="r1"))
    with sqlite3.connect(db_path) as con:
        con.execute("""
            CREATE TRIGGER trava_viveiro BEFORE DELETE ON ponds
            BEGIN SELECT RAISE(ABORT, 'viveiro travado'); END;
        """)

    with pytest.raises(sqlite3.DatabaseError):
        ponds.delete("2")

    # falhou no viveiro: os registros de consumo continuam lá
    assert ponds.get("2") is not None
    assert [r.id for r in intake.list_for_pond("2")] == ["r1"]


def test_caderno_de_trato(db_path):
    repo = SQLiteFeedingRecordRepo(db_path)
    repo.add(PondFeedingRecord("V1", "Ração A", 5.0, date=date(2024, 5, 1), id="a"))
    repo.add(PondFeedingRecord("V2", "Ração B", 3.0, pond_size=1.8, feeding_time="06:00",
                               date=date(2024, 5, 2), id="b"))
    repo.add(PondFeedingRecord("V1", "Ração A", 6.0, date=date(2024, 5, 1), id="a"))

    itens = repo.list_all()
    assert [r.id for r in itens] == ["b", "a"]
    assert itens[1].feed_amount == 6.0
    assert itens[0].feeding_time == "06:00"

    repo.delete("b")
    assert [r.id for r in repo.list_all()] == ["a"]
    repo.clear()
    assert repo.list_all() == []
