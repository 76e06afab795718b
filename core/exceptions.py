# exceptions.py
# Exceções do sistema (armazenamento remoto e configuração)


class StoreError(Exception):
    """Falha ao falar com o armazenamento (rede, autenticação, SQL)."""


class OperationError(StoreError):
    """Falha de uma operação específica, com mensagem fixa para o usuário."""

    user_message = ""

    def __init__(self, cause: Exception | None = None):
        super().__init__(self.user_message)
        self.cause = cause


class FetchError(OperationError):
    user_message = "Erro ao carregar clientes"


class CreateError(OperationError):
    user_message = "Erro ao adicionar cliente"


class UpdateError(OperationError):
    user_message = "Erro ao atualizar cliente"


class DeleteError(OperationError):
    user_message = "Erro ao excluir cliente"


class ConfigError(Exception):
    """Configuração inválida ou incompleta (ex.: Supabase sem URL/chave)."""
