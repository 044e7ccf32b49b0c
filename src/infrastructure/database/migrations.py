# estrutura do banco
import logging
import sqlite3
from pathlib import Path
from typing import Callable, Dict, List, Union

from config.database import DATABASE_PATH

log = logging.getLogger("camarao.infra.migrations")

PathLike = Union[str, Path]

def migration_001():
    """Cria a tabela 'ponds' com o cadastro dos viveiros."""
    return """
    CREATE TABLE ponds (
        id TEXT PRIMARY KEY,
        pond_number TEXT NOT NULL,
        size REAL NOT NULL,
        uom TEXT NOT NULL DEFAULT 'hectares',
        feeding_type TEXT DEFAULT '',
        status TEXT NOT NULL DEFAULT 'active',
        created_at DATETIME DEFAULT (datetime('now', 'localtime'))
    );
    """

def migration_002():
    """Cria a tabela 'feed_intake_records' (ofertado x consumido por viveiro)."""
    return """
    CREATE TABLE feed_intake_records (
        id TEXT PRIMARY KEY,
        pond_id TEXT NOT NULL,
        date TEXT NOT NULL,
        feed_amount_kg REAL NOT NULL,
        consumed_kg REAL NOT NULL,
        notes TEXT DEFAULT '',
        created_at DATETIME DEFAULT (datetime('now', 'localtime')),
        FOREIGN KEY (pond_id) REFERENCES ponds(id)
    );
    """

def migration_003():
    """Cria a tabela 'pond_feeding_records' (caderno de trato)."""
    return """
    CREATE TABLE pond_feeding_records (
        id TEXT PRIMARY KEY,
        pond_name TEXT NOT NULL,
        pond_size REAL DEFAULT 0,
        feed_type TEXT NOT NULL,
        feed_amount REAL NOT NULL,
        feeding_time TEXT DEFAULT '',
        notes TEXT DEFAULT '',
        date TEXT NOT NULL,
        created_at DATETIME DEFAULT (datetime('now', 'localtime'))
    );
    """

def migration_004():
    """Cria índice composto para consultas de consumo por (pond_id, date)."""
    return """
    CREATE INDEX idx_feed_intake_pond_date ON feed_intake_records(pond_id, date);
    """

def migration_005():
    """Cria índice do caderno de trato por nome do viveiro."""
    return """
    CREATE INDEX idx_pond_feeding_pond_name ON pond_feeding_records(pond_name);
    """

def migration_006():
    """Cria índice do caderno de trato por data."""
    return """
    CREATE INDEX idx_pond_feeding_date ON pond_feeding_records(date);
    """

def migration_007():
    """Insere os viveiros de exemplo (seed)."""
    return """
    INSERT INTO ponds (id, pond_number, size, uom, feeding_type) VALUES
    ('1', 'Viveiro 1', 2.5, 'hectares', 'Padrão'),
    ('2', 'Viveiro 2', 1.8, 'hectares', 'Premium'),
    ('3', 'Viveiro 3', 3.2, 'hectares', 'Orgânica');
    """

AVAILABLE_MIGRATIONS: Dict[str, Callable[[], str]] = {
    '001': migration_001,
    '002': migration_002,
    '003': migration_003,
    '004': migration_004,
    '005': migration_005,
    '006': migration_006,
    '007': migration_007,
}

# tabela para controlar migrations executadas
def create_migrations_table(db_path: PathLike = DATABASE_PATH):
    """Garante a existência da tabela de controle 'migrations'."""
    with sqlite3.connect(db_path) as connec:
        cursor = connec.cursor()
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS migrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                version TEXT UNIQUE NOT NULL,
                executed_at DATETIME DEFAULT (datetime('now', 'localtime'))
            );
        """)
        connec.commit()


def get_executed_migrations(db_path: PathLike = DATABASE_PATH) -> List[str]:
    """
    Retorna a lista das migrations já executadas (strings de versão).

    Observação:
        Se a tabela 'migrations' ainda não existir, retorna lista vazia.
    """
    try:
        with sqlite3.connect(db_path) as connec:
            cursor = connec.cursor()
            cursor.execute("SELECT version FROM migrations ORDER BY version")
            return [row[0] for row in cursor.fetchall()]
    except sqlite3.OperationalError:
        # se ainda nao existir ai retorna a lista zerada
        return []


def run_migrations(db_path: PathLike = DATABASE_PATH, seed: bool = True) -> List[str]:
    """
    Executa as migrations pendentes, na ordem declarada em AVAILABLE_MIGRATIONS.

    Args:
        db_path: arquivo do banco.
        seed: se False, pula a carga dos viveiros de exemplo (marcando-a como executada).

    Returns:
        Versões executadas nesta chamada.
    """
    create_migrations_table(db_path)
    executed = get_executed_migrations(db_path)

    ran: List[str] = []
    for version, migration_func in AVAILABLE_MIGRATIONS.items():
        if version in executed:
            continue
        if migration_func is migration_007 and not seed:
            _mark_executed(db_path, version)
            continue
        log.info("migration_start version=%s", version)
        execute_migration(migration_func, version, db_path)
        ran.append(version)

    log.info("migrations_done ran=%s", ",".join(ran) or "-")
    return ran


def _mark_executed(db_path: PathLike, version: str) -> None:
    with sqlite3.connect(db_path) as connec:
        connec.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
        connec.commit()


def execute_migration(migration_func, version, db_path: PathLike = DATABASE_PATH):
    """
    Executa uma migration específica e registra a versão na tabela 'migrations'.

    Args:
        migration_func: função que retorna o SQL (DDL/DML) da migration.
        version: string de versão (ex.: '001', '002').
    """
    try:
        with sqlite3.connect(db_path) as connec:
            cursor = connec.cursor()

            # Executa o SQL da migration
            cursor.execute(migration_func())

            # Marca como executada na tabela migrations
            cursor.execute(
                "INSERT INTO migrations (version) VALUES (?)",
                (version,)
            )

            connec.commit()

    except sqlite3.Error:
        log.exception("migration_failed version=%s", version)
        raise


if __name__ == "__main__":
    from config.settings import LOG_LEVEL
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    print("executando migrations...")
    run_migrations()

    print("\nverificando migrations executadas:")
    print(f"Migrations executadas: {get_executed_migrations()}")
