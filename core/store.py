# store.py
# Acesso à tabela `customers`: Supabase (REST) ou SQLite local

import http.client
import json
import sqlite3
import urllib.error
import urllib.parse
import urllib.request
import uuid
from typing import Any, List, Optional, Protocol

from core.config import STORE_SUPABASE, StoreSettings
from core.database import Database
from core.exceptions import StoreError
from core.logger import log_debug
from core.models import Customer, CustomerFields

TABLE = "customers"


class CustomerStore(Protocol):
    def fetch_all(self) -> List[Customer]: ...

    def create(self, fields: CustomerFields) -> None: ...

    def modify(self, customer_id: str, fields: CustomerFields) -> None: ...

    def remove(self, customer_id: str) -> None: ...


class SupabaseStore:
    """
    Cliente da API REST do Supabase (PostgREST) para a tabela de clientes.

    Toda falha de rede ou resposta HTTP de erro vira StoreError. Não há
    novas tentativas.
    """

    def __init__(self, url: str, api_key: str, timeout: float = 10.0, table: str = TABLE):
        self.base_url = f"{url.rstrip('/')}/rest/v1/{table}"
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self, prefer: Optional[str] = None) -> dict:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": "Alfaiataria/1.0",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _request(self, method: str, params: dict, body: Any = None, prefer: Optional[str] = None) -> Any:
        url = f"{self.base_url}?{urllib.parse.urlencode(params)}" if params else self.base_url
        data = json.dumps(body).encode("utf-8") if body is not None else None
        req = urllib.request.Request(url, data=data, headers=self._headers(prefer), method=method)
        log_debug(f"Supabase {method} {url}")
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                raw = response.read().decode("utf-8")
        except UnicodeDecodeError as e:
            raise StoreError(f"Resposta inválida do Supabase: {e}") from e
        except http.client.HTTPException as e:  # resposta truncada / malformada
            raise StoreError(f"Resposta incompleta do Supabase: {e!r}") from e
        except urllib.error.HTTPError as e:
            detail = ""
            try:
                detail = e.read().decode("utf-8")
            except Exception:
                pass
            raise StoreError(f"HTTP {e.code} em {method} {TABLE}: {detail}") from e
        except urllib.error.URLError as e:
            raise StoreError(f"Sem conexão com o Supabase: {e.reason}") from e
        except OSError as e:  # timeout de socket
            raise StoreError(f"Erro de rede: {e}") from e
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise StoreError(f"Resposta inválida do Supabase: {e}") from e

    def fetch_all(self) -> List[Customer]:
        rows = self._request("GET", {"select": "*", "order": "created_at.desc"})
        if not isinstance(rows, list):
            raise StoreError("Resposta inesperada ao listar clientes")
        return [Customer.from_row(r) for r in rows]

    def create(self, fields: CustomerFields) -> None:
        self._request("POST", {}, [fields.to_dict()], prefer="return=minimal")

    def modify(self, customer_id: str, fields: CustomerFields) -> None:
        self._request("PATCH", {"id": f"eq.{customer_id}"}, fields.to_dict(), prefer="return=minimal")

    def remove(self, customer_id: str) -> None:
        self._request("DELETE", {"id": f"eq.{customer_id}"}, prefer="return=minimal")


class SqliteStore:
    """Mesmo contrato do SupabaseStore, sobre um arquivo SQLite local."""

    def __init__(self, db: Database):
        self.db = db

    def fetch_all(self) -> List[Customer]:
        try:
            rows = self.db.query(f"SELECT * FROM {TABLE} ORDER BY created_at DESC, rowid DESC")
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return [Customer.from_row(r) for r in rows]

    def create(self, fields: CustomerFields) -> None:
        try:
            self.db.execute(
                f"INSERT INTO {TABLE}(id, name, shirt, pants, phone) VALUES (?,?,?,?,?)",
                (str(uuid.uuid4()), fields.name, fields.shirt, fields.pants, fields.phone),
            )
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def modify(self, customer_id: str, fields: CustomerFields) -> None:
        try:
            self.db.execute(
                f"UPDATE {TABLE} SET name=?, shirt=?, pants=?, phone=? WHERE id=?",
                (fields.name, fields.shirt, fields.pants, fields.phone, customer_id),
            )
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def remove(self, customer_id: str) -> None:
        try:
            self.db.execute(f"DELETE FROM {TABLE} WHERE id=?", (customer_id,))
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e


def open_store(settings: StoreSettings) -> CustomerStore:
    """Cria o armazenamento configurado (Supabase ou SQLite local)."""
    if settings.kind == STORE_SUPABASE:
        return SupabaseStore(settings.supabase_url, settings.supabase_key, timeout=settings.request_timeout)
    return SqliteStore(Database(settings.database_path))
