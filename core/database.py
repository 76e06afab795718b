# database.py
# Responsável pela conexão e operações com o banco de dados SQLite local

import sqlite3
from typing import Any, List, Tuple, Union, Mapping

# Parameter type accepted by sqlite3 (positional tuple or named mapping)
Params = Union[Tuple[Any, ...], Mapping[str, Any]]

class Database:
    def __init__(self, db_path: str):
        self.db_path = db_path
        # check_same_thread=False: as chamadas ao banco rodam em QThreads de trabalho
        # timeout define quanto esperar em locks antes de falhar
        self.conn = sqlite3.connect(self.db_path, timeout=10, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        c = self.conn.cursor()
        c.execute("PRAGMA journal_mode=WAL")  # leitores não bloqueiam escritor
        c.execute("PRAGMA synchronous=NORMAL")
        c.execute("PRAGMA busy_timeout=5000")  # 5s de espera em lock
        self.conn.commit()
        self._init_db()

    def _init_db(self):
        cur = self.conn.cursor()
        # Mesmo esquema da tabela `customers` do Supabase
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS customers (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                shirt TEXT NOT NULL,
                pants TEXT NOT NULL,
                phone TEXT NOT NULL DEFAULT '',
                created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now'))
            )
            """
        )
        self.conn.commit()

    def execute(self, sql: str, params: Params = ()) -> sqlite3.Cursor:
        cur = self.conn.cursor()
        cur.execute(sql, params)
        self.conn.commit()
        return cur

    def query(self, sql: str, params: Params = ()) -> List[sqlite3.Row]:
        cur = self.conn.cursor()
        cur.execute(sql, params)
        return cur.fetchall()

    def close(self) -> None:
        self.conn.close()
