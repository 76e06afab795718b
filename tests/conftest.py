"""Shared fixtures: in-memory store, recording notifier, scripted confirm."""

from __future__ import annotations

from typing import Any, Callable, List, Tuple

import pytest

from core.exceptions import StoreError
from core.models import Customer, CustomerFields
from core.services import CustomerService


def make_customer(cid: str, name: str, phone: str = "", shirt: str = "Peito 40", pants: str = "Cintura 32",
                  created_at: str = "2024-01-01T00:00:00") -> Customer:
    return Customer(id=cid, name=name, shirt=shirt, pants=pants, phone=phone, created_at=created_at)


class FakeStore:
    """CustomerStore in memory; operations listed in `fail` raise StoreError."""

    def __init__(self, customers=()):
        self.customers: List[Customer] = list(customers)
        self.calls: List[Tuple[Any, ...]] = []
        self.fail: set[str] = set()
        self._seq = 0

    def _check(self, op: str) -> None:
        if op in self.fail:
            raise StoreError(f"{op} failed: HTTP 500 internal detail")

    def fetch_all(self) -> List[Customer]:
        self.calls.append(("fetch_all",))
        self._check("fetch_all")
        return list(self.customers)

    def create(self, fields: CustomerFields) -> None:
        self.calls.append(("create", fields))
        self._check("create")
        self._seq += 1
        new = Customer(id=f"new-{self._seq}", created_at=f"2099-01-01T00:00:{self._seq:02d}", **fields.to_dict())
        self.customers.insert(0, new)

    def modify(self, customer_id: str, fields: CustomerFields) -> None:
        self.calls.append(("modify", customer_id, fields))
        self._check("modify")
        self.customers = [
            Customer(id=c.id, created_at=c.created_at, **fields.to_dict()) if c.id == customer_id else c
            for c in self.customers
        ]

    def remove(self, customer_id: str) -> None:
        self.calls.append(("remove", customer_id))
        self._check("remove")
        self.customers = [c for c in self.customers if c.id != customer_id]

    def count(self, op: str) -> int:
        return sum(1 for call in self.calls if call[0] == op)


class RecordingNotifier:
    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))


class ScriptedConfirm:
    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: List[str] = []

    def __call__(self, text: str) -> bool:
        self.prompts.append(text)
        return self.answer


class DeferredRunner:
    """Holds calls until resolved, to simulate in-flight requests."""

    def __init__(self):
        self.pending: List[Tuple[Callable, Callable, Callable]] = []

    def __call__(self, call, on_success, on_error) -> None:
        self.pending.append((call, on_success, on_error))

    def resolve(self, index: int = 0) -> None:
        call, on_success, on_error = self.pending.pop(index)
        try:
            result = call()
        except Exception as e:
            on_error(e)
            return
        on_success(result)


@pytest.fixture
def alice() -> Customer:
    return make_customer("a1", "Alice", "555-1111", created_at="2024-02-01T10:00:00")


@pytest.fixture
def bob() -> Customer:
    return make_customer("b2", "Bob", "555-2222", created_at="2024-01-01T10:00:00")


@pytest.fixture
def store(alice, bob) -> FakeStore:
    return FakeStore([alice, bob])


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def accept() -> ScriptedConfirm:
    return ScriptedConfirm(True)


@pytest.fixture
def service(store, notifier, accept) -> CustomerService:
    svc = CustomerService(store, notifier, accept)
    svc.load()
    store.calls.clear()
    return svc
