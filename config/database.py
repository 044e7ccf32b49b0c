# config do banco
from pathlib import Path

# banco
DATABASE_PATH = Path("data/camaraosync.db")


# vai criar o diretorio se nao existir
DATABASE_PATH.parent.mkdir(exist_ok=True)
