# workers.py
# Chamadas ao armazenamento em background (não travam a interface)

from typing import Any, Callable, List

from PyQt6.QtCore import QObject, QThread, pyqtSignal


class StoreCallThread(QThread):
    """Thread que executa uma única chamada ao armazenamento."""

    # Sinais
    succeeded = pyqtSignal(object)  # resultado da chamada
    failed = pyqtSignal(object)  # exceção

    def __init__(self, call: Callable[[], Any], on_success: Callable[[Any], None],
                 on_error: Callable[[Exception], None]):
        super().__init__()
        self.call = call
        self.on_success = on_success
        self.on_error = on_error

    def run(self):
        try:
            result = self.call()
        except Exception as e:
            self.failed.emit(e)
            return
        self.succeeded.emit(result)


class QtRunner(QObject):
    """
    Runner do CustomerService baseado em QThread.

    Os callbacks são executados na thread da interface (os slots pertencem a
    este QObject, criado na thread principal). Não há cancelamento: se duas
    respostas chegarem fora de ordem, a última vence.
    """

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._threads: List[StoreCallThread] = []

    def __call__(self, call, on_success, on_error) -> None:
        thread = StoreCallThread(call, on_success, on_error)
        thread.succeeded.connect(self._on_succeeded)
        thread.failed.connect(self._on_failed)
        thread.finished.connect(self._on_finished)
        # Mantém referência até terminar (evita coleta da thread em execução)
        self._threads.append(thread)
        thread.start()

    def _on_succeeded(self, result: Any) -> None:
        thread = self.sender()
        if isinstance(thread, StoreCallThread):
            thread.on_success(result)

    def _on_failed(self, exc: Exception) -> None:
        thread = self.sender()
        if isinstance(thread, StoreCallThread):
            thread.on_error(exc)

    def _on_finished(self) -> None:
        thread = self.sender()
        if isinstance(thread, StoreCallThread) and thread in self._threads:
            self._threads.remove(thread)
            thread.deleteLater()

    def wait_all(self, msecs: int = 5000) -> None:
        """Aguarda threads pendentes (usado ao fechar a janela)."""
        for thread in list(self._threads):
            thread.wait(msecs)
