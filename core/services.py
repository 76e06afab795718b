# services.py
# Camada de serviços: formulário de clientes + CRUD no armazenamento

from typing import Any, Callable, Dict, List, Protocol, Type, TypeVar

from core.exceptions import CreateError, DeleteError, FetchError, OperationError, UpdateError
from core.logger import log_error, log_event, log_warning
from core.models import Customer
from core.state import (
    AppState, EditCancelled, EditRequested, Event, FetchFailed, FetchStarted,
    FetchSucceeded, FieldChanged, MutationFailed, MutationStarted, MutationSucceeded,
    QueryChanged, reduce,
)
from core.store import CustomerStore

T = TypeVar("T")

SUCCESS_MESSAGES: Dict[str, str] = {
    "create": "Cliente adicionado com sucesso",
    "update": "Cliente atualizado com sucesso",
    "delete": "Cliente excluído com sucesso",
}

ERRORS: Dict[str, Type[OperationError]] = {
    "fetch": FetchError,
    "create": CreateError,
    "update": UpdateError,
    "delete": DeleteError,
}

REQUIRED_MESSAGE = "Preencha nome, camisa e calça"
DELETE_CONFIRM_MESSAGE = "Tem certeza que deseja excluir este cliente?"


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


# Pergunta sim/não bloqueante; True = confirmou
Confirm = Callable[[str], bool]

# Executa `call` e entrega o resultado em on_success ou a exceção em on_error
Runner = Callable[[Callable[[], Any], Callable[[Any], None], Callable[[Exception], None]], None]


def run_inline(call: Callable[[], T], on_success: Callable[[T], None],
               on_error: Callable[[Exception], None]) -> None:
    """Runner síncrono (testes e scripts)."""
    try:
        result = call()
    except Exception as e:
        on_error(e)
        return
    on_success(result)


class CustomerService:
    """
    Controla a tela de clientes: lista, pesquisa, formulário de criação/edição
    e exclusão com confirmação.

    Todo o estado vive em um AppState imutável; cada ação gera eventos que
    passam por `reduce`. Após qualquer alteração bem-sucedida a lista inteira
    é recarregada do armazenamento.
    """

    def __init__(self, store: CustomerStore, notifier: Notifier, confirm: Confirm,
                 runner: Runner = run_inline) -> None:
        self.store = store
        self.notifier = notifier
        self.confirm = confirm
        self.runner = runner
        self.state = AppState()
        self._listeners: List[Callable[[AppState], None]] = []

    def subscribe(self, listener: Callable[[AppState], None]) -> None:
        self._listeners.append(listener)

    def dispatch(self, event: Event) -> AppState:
        self.state = reduce(self.state, event)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    # -----------------------------
    # Lista
    # -----------------------------
    def load(self) -> None:
        self.dispatch(FetchStarted())
        self.runner(self.store.fetch_all, self._fetch_done, self._fetch_failed)

    def _fetch_done(self, customers: List[Customer]) -> None:
        log_event(f"{len(customers)} cliente(s) carregado(s)")
        self.dispatch(FetchSucceeded(tuple(customers)))

    def _fetch_failed(self, exc: Exception) -> None:
        self._report("fetch", exc)
        self.dispatch(FetchFailed())

    def search(self, query: str) -> None:
        self.dispatch(QueryChanged(query))

    # -----------------------------
    # Formulário
    # -----------------------------
    def set_field(self, name: str, value: str) -> None:
        self.dispatch(FieldChanged(name, value))

    def edit(self, customer: Customer) -> None:
        self.dispatch(EditRequested(customer))

    def cancel_edit(self) -> None:
        self.dispatch(EditCancelled())

    def submit(self) -> bool:
        """Cria ou atualiza conforme o modo. Retorna False se nada foi enviado."""
        if self.state.loading:
            log_warning("Envio ignorado: operação em andamento")
            return False
        if self.state.form.missing_required():
            self.notifier.warning(REQUIRED_MESSAGE)
            return False

        fields = self.state.form.stripped()
        editing = self.state.editing
        if editing is not None:
            self._mutate("update", lambda: self.store.modify(editing.id, fields))
        else:
            self._mutate("create", lambda: self.store.create(fields))
        return True

    def delete(self, customer: Customer) -> bool:
        """Exclui após confirmação. Recusar não faz nada."""
        if not self.confirm(DELETE_CONFIRM_MESSAGE):
            return False
        self._mutate("delete", lambda: self.store.remove(customer.id))
        return True

    # -----------------------------
    # Internos
    # -----------------------------
    def _mutate(self, operation: str, call: Callable[[], Any]) -> None:
        self.dispatch(MutationStarted(operation))
        self.runner(
            call,
            lambda _result: self._mutation_done(operation),
            lambda exc: self._mutation_failed(operation, exc),
        )

    def _mutation_done(self, operation: str) -> None:
        log_event(f"Cliente: {operation} concluído")
        self.dispatch(MutationSucceeded(operation))
        self.notifier.success(SUCCESS_MESSAGES[operation])
        self.load()

    def _mutation_failed(self, operation: str, exc: Exception) -> None:
        self._report(operation, exc)
        self.dispatch(MutationFailed(operation))

    def _report(self, operation: str, exc: Exception) -> None:
        error = ERRORS[operation](exc)
        log_error(error.user_message, error.cause)
        self.notifier.error(error.user_message)
