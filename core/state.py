# state.py
# Estado da tela de clientes e eventos que o transformam

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple, Union

from core.models import Customer, CustomerFields, FORM_FIELDS
from core.search import filter_customers


@dataclass(frozen=True)
class AppState:
    customers: Tuple[Customer, ...] = ()
    query: str = ""
    form: CustomerFields = field(default_factory=CustomerFields.empty)
    editing: Optional[Customer] = None
    # chamadas ao armazenamento em andamento
    pending: int = 0
    # primeira listagem já respondeu (com sucesso ou falha)
    fetched: bool = False

    @property
    def loading(self) -> bool:
        return self.pending > 0 or not self.fetched

    @property
    def filtered(self) -> List[Customer]:
        return filter_customers(self.customers, self.query)

    @property
    def view_key(self) -> Tuple[Tuple[Customer, ...], str]:
        """Só muda quando a lista ou a pesquisa mudam (não a cada tecla do formulário)."""
        return self.customers, self.query

    @property
    def is_editing(self) -> bool:
        return self.editing is not None


# -----------------------------
# Eventos
# -----------------------------
@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchSucceeded:
    customers: Tuple[Customer, ...]


@dataclass(frozen=True)
class FetchFailed:
    pass


@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class FieldChanged:
    name: str
    value: str


@dataclass(frozen=True)
class EditRequested:
    customer: Customer


@dataclass(frozen=True)
class EditCancelled:
    pass


@dataclass(frozen=True)
class MutationStarted:
    operation: str  # create | update | delete


@dataclass(frozen=True)
class MutationSucceeded:
    operation: str


@dataclass(frozen=True)
class MutationFailed:
    operation: str


Event = Union[
    FetchStarted, FetchSucceeded, FetchFailed, QueryChanged, FieldChanged,
    EditRequested, EditCancelled, MutationStarted, MutationSucceeded, MutationFailed,
]


def _done(state: AppState) -> int:
    return max(state.pending - 1, 0)


def reduce(state: AppState, event: Event) -> AppState:
    """Aplica um evento ao estado e retorna o novo estado (sem efeitos colaterais)."""
    if isinstance(event, FetchStarted):
        return replace(state, pending=state.pending + 1)
    if isinstance(event, FetchSucceeded):
        return replace(state, customers=tuple(event.customers), pending=_done(state), fetched=True)
    if isinstance(event, FetchFailed):
        # mantém a lista anterior visível
        return replace(state, pending=_done(state), fetched=True)
    if isinstance(event, QueryChanged):
        return replace(state, query=event.query)
    if isinstance(event, FieldChanged):
        if event.name not in FORM_FIELDS:
            raise ValueError(f"Campo desconhecido: {event.name}")
        return replace(state, form=replace(state.form, **{event.name: event.value}))
    if isinstance(event, EditRequested):
        return replace(
            state,
            editing=event.customer,
            form=CustomerFields.from_customer(event.customer),
        )
    if isinstance(event, EditCancelled):
        return replace(state, editing=None, form=CustomerFields.empty())
    if isinstance(event, MutationStarted):
        return replace(state, pending=state.pending + 1)
    if isinstance(event, MutationSucceeded):
        return replace(state, editing=None, form=CustomerFields.empty(), pending=_done(state))
    if isinstance(event, MutationFailed):
        return replace(state, pending=_done(state))
    raise TypeError(f"Evento desconhecido: {event!r}")
