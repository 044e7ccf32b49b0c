# implementação concreta de como salvar os dados no db
# os casos de uso só enxergam os protocolos de src/domain/repositories

from __future__ import annotations

import sqlite3
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from config.database import DATABASE_PATH
from src.domain.entities.feed_intake import FeedIntakeRecord
from src.domain.entities.feeding_record import PondFeedingRecord
from src.domain.entities.pond import Pond
from src.domain.enums import AreaUnit, PondStatus
from src.domain.repositories.feed_intake_repository import IFeedIntakeRepository
from src.domain.repositories.feeding_record_repository import IFeedingRecordRepository
from src.domain.repositories.pond_repository import IPondRepository

PathLike = Union[str, Path]


class DatabaseManager:
    """
    Conexão SQLite de vida curta.
    - linhas como sqlite3.Row (acesso por nome)
    - chaves estrangeiras ligadas
    - commit na saída normal, rollback se houver exceção
    """

    def __init__(self, db_path: PathLike = DATABASE_PATH):
        self.db_path = str(db_path)
        self.conexao: Optional[sqlite3.Connection] = None

    def __enter__(self) -> sqlite3.Connection:
        self.conexao = sqlite3.connect(self.db_path)
        self.conexao.row_factory = sqlite3.Row
        self.conexao.execute("PRAGMA foreign_keys=ON;")
        return self.conexao

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.conexao:
            if exc_type is None:
                self.conexao.commit()
            else:
                self.conexao.rollback()
            self.conexao.close()
            self.conexao = None


# =============================================================================
# VIVEIROS
# =============================================================================
def _row_to_pond(r: sqlite3.Row) -> Pond:
    return Pond(
        id=r["id"], pond_number=r["pond_number"], size=r["size"],
        uom=AreaUnit(r["uom"]), feeding_type=r["feeding_type"] or "",
        status=PondStatus(r["status"]),
    )

class SQLitePondRepo(IPondRepository):
    def __init__(self, db_path: PathLike = DATABASE_PATH) -> None:
        self.db_path = db_path

    def get(self, pond_id: str) -> Optional[Pond]:
        with DatabaseManager(self.db_path) as con:
            r = con.execute("""
                SELECT id, pond_number, size, uom, feeding_type, status
                  FROM ponds
                 WHERE id=?
            """, (pond_id,)).fetchone()
        return _row_to_pond(r) if r else None

    def list_all(self) -> List[Pond]:
        with DatabaseManager(self.db_path) as con:
            rows = con.execute("""
                SELECT id, pond_number, size, uom, feeding_type, status
                  FROM ponds
                 ORDER BY rowid
            """).fetchall()
        return [_row_to_pond(r) for r in rows]

    def add(self, pond: Pond) -> None:
        with DatabaseManager(self.db_path) as con:
            con.execute("""
                INSERT INTO ponds (id, pond_number, size, uom, feeding_type, status)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    pond_number=excluded.pond_number, size=excluded.size, uom=excluded.uom,
                    feeding_type=excluded.feeding_type, status=excluded.status
            """, (pond.id, pond.pond_number, pond.size, pond.uom.value,
                  pond.feeding_type, pond.status.value))

    def delete(self, pond_id: str) -> int:
        # filhos primeiro (FK); mesma conexão = mesma transação
        with DatabaseManager(self.db_path) as con:
            cur = con.execute("DELETE FROM feed_intake_records WHERE pond_id=?", (pond_id,))
            con.execute("DELETE FROM ponds WHERE id=?", (pond_id,))
            return cur.rowcount


# =============================================================================
# CONSUMO DE RAÇÃO
# =============================================================================
class SQLiteFeedIntakeRepo(IFeedIntakeRepository):
    def __init__(self, db_path: PathLike = DATABASE_PATH) -> None:
        self.db_path = db_path

    def add(self, record: FeedIntakeRecord) -> None:
        with DatabaseManager(self.db_path) as con:
            con.execute("""
                INSERT OR REPLACE INTO feed_intake_records
                (id, pond_id, date, feed_amount_kg, consumed_kg, notes)
                VALUES (?, ?, ?, ?, ?, ?)
            """, (record.id, record.pond_id, record.date.isoformat(),
                  record.feed_amount_kg, record.consumed_kg, record.notes))

    def list_for_pond(self, pond_id: str, limit: int = 100) -> List[FeedIntakeRecord]:
        with DatabaseManager(self.db_path) as con:
            rows = con.execute("""
                SELECT id, pond_id, date, feed_amount_kg, consumed_kg, notes
                  FROM feed_intake_records
                 WHERE pond_id=?
                 ORDER BY date DESC, rowid DESC
                 LIMIT ?
            """, (pond_id, limit)).fetchall()
        return [
            FeedIntakeRecord(
                pond_id=r["pond_id"], feed_amount_kg=r["feed_amount_kg"],
                consumed_kg=r["consumed_kg"], date=date.fromisoformat(r["date"]),
                notes=r["notes"] or "", id=r["id"],
            )
            for r in rows
        ]


# =============================================================================
# CADERNO DE TRATO
# =============================================================================
class SQLiteFeedingRecordRepo(IFeedingRecordRepository):
    def __init__(self, db_path: PathLike = DATABASE_PATH) -> None:
        self.db_path = db_path

    def add(self, record: PondFeedingRecord) -> None:
        with DatabaseManager(self.db_path) as con:
            con.execute("""
                INSERT OR REPLACE INTO pond_feeding_records
                (id, pond_name, pond_size, feed_type, feed_amount, feeding_time, notes, date)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """, (record.id, record.pond_name, record.pond_size, record.feed_type,
                  record.feed_amount, record.feeding_time, record.notes, record.date.isoformat()))

    def list_all(self) -> List[PondFeedingRecord]:
        with DatabaseManager(self.db_path) as con:
            rows = con.execute("""
                SELECT id, pond_name, pond_size, feed_type, feed_amount, feeding_time, notes, date
                  FROM pond_feeding_records
                 ORDER BY date DESC, rowid DESC
            """).fetchall()
        return [
            PondFeedingRecord(
                pond_name=r["pond_name"], feed_type=r["feed_type"], feed_amount=r["feed_amount"],
                pond_size=r["pond_size"] or 0.0, feeding_time=r["feeding_time"] or "",
                notes=r["notes"] or "", date=date.fromisoformat(r["date"]), id=r["id"],
            )
            for r in rows
        ]

    def delete(self, record_id: str) -> None:
        with DatabaseManager(self.db_path) as con:
            con.execute("DELETE FROM pond_feeding_records WHERE id=?", (record_id,))

    def clear(self) -> None:
        with DatabaseManager(self.db_path) as con:
            con.execute("DELETE FROM pond_feeding_records")
