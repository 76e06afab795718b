# config.py
# Configurações globais e leitura de YAML

from dataclasses import dataclass
from typing import Dict, Any, Optional
import yaml
import os
import sys

from core.exceptions import ConfigError

STORE_SUPABASE = "supabase"
STORE_SQLITE = "sqlite"

def get_app_data_directory() -> str:
    """
    Retorna o diretório de dados da aplicação de forma robusta.
    Funciona tanto em desenvolvimento quanto em executáveis PyInstaller.
    ALFAIATARIA_DATA_DIR tem prioridade quando definido.
    """
    override = os.getenv("ALFAIATARIA_DATA_DIR")
    if override:
        app_data_dir = override
    elif getattr(sys, 'frozen', False) and hasattr(sys, '_MEIPASS'):
        # Executável: dados do usuário ficam no AppData
        app_data_dir = os.path.join(os.path.expanduser("~"), "AppData", "Local", "Alfaiataria")
    else:
        # Modo desenvolvimento - usa pasta data no projeto
        app_data_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'data')

    os.makedirs(app_data_dir, exist_ok=True)
    return app_data_dir

def get_config_path() -> str:
    return os.path.join(get_app_data_directory(), 'config.yaml')

# QSS para popups escuros (contraste garantido)
QSS_POPUP_DARK = """
QDialog, QMessageBox {
    background: #23272e;
    color: #f3f4f6;
}
QLabel, QDialog QLabel, QMessageBox QLabel {
    color: #f3f4f6;
    background: transparent;
}
QPushButton, QDialog QPushButton, QMessageBox QPushButton {
    background: #2d323b;
    color: #f3f4f6;
    border: 1px solid #444;
    border-radius: 4px;
    padding: 4px 12px;
}
QPushButton:hover, QDialog QPushButton:hover, QMessageBox QPushButton:hover {
    background: #3b4252;
}
QPushButton:pressed, QDialog QPushButton:pressed, QMessageBox QPushButton:pressed {
    background: #22262c;
}
"""

# QSS para popups claros (tema light)
QSS_POPUP_LIGHT = """
QDialog, QMessageBox {
    background: #ffffff;
    color: #1f2937;
}
QLabel, QDialog QLabel, QMessageBox QLabel {
    color: #1f2937;
    background: transparent;
}
QPushButton, QDialog QPushButton, QMessageBox QPushButton {
    background: #e5e7eb;
    color: #111827;
    border: 1px solid #d1d5db;
    border-radius: 10px;
    padding: 8px 14px;
}
QPushButton:hover, QDialog QPushButton:hover, QMessageBox QPushButton:hover {
    background: #dbeafe;
    border-color: #bfdbfe;
}
QPushButton:pressed, QDialog QPushButton:pressed, QMessageBox QPushButton:pressed {
    background: #c7d2fe;
}
"""

def popup_qss(theme: Optional[str] = None) -> str:
    """Retorna o QSS de popups para o tema informado (ou o tema salvo)."""
    if theme is None:
        theme = load_config().get("theme", "light")
    return QSS_POPUP_DARK if theme == "dark" else QSS_POPUP_LIGHT

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Carrega as configurações do arquivo YAML.

    Returns:
        Dict[str, Any]: Dicionário com as configurações
    """
    path = path or get_config_path()
    if not os.path.exists(path):
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}

def save_config(data: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Salva as configurações no arquivo YAML.

    Args:
        data: Dicionário com as configurações para salvar
    """
    path = path or get_config_path()
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(data, f, allow_unicode=True)

def get_database_path(config: Optional[Dict[str, Any]] = None) -> str:
    """Caminho do banco SQLite local (configurado ou padrão no diretório de dados)."""
    if config is None:
        config = load_config()
    db_path = config.get('database_path')
    if db_path:
        return os.path.abspath(db_path)
    return os.path.abspath(os.path.join(get_app_data_directory(), 'alfaiataria.db'))


@dataclass(frozen=True)
class StoreSettings:
    kind: str
    supabase_url: str = ""
    supabase_key: str = ""
    database_path: str = ""
    request_timeout: float = 10.0


def get_store_settings(config: Optional[Dict[str, Any]] = None) -> StoreSettings:
    """
    Resolve onde os clientes são armazenados.

    Variáveis de ambiente (SUPABASE_URL, SUPABASE_ANON_KEY, ALFAIATARIA_STORE)
    têm prioridade sobre o config.yaml. Sem escolha explícita, usa Supabase
    quando URL e chave existem, senão o SQLite local.
    """
    if config is None:
        config = load_config()
    url = os.getenv("SUPABASE_URL") or config.get("supabase_url") or ""
    key = os.getenv("SUPABASE_ANON_KEY") or config.get("supabase_key") or ""
    kind = os.getenv("ALFAIATARIA_STORE") or config.get("store") or ""
    if not kind:
        kind = STORE_SUPABASE if (url and key) else STORE_SQLITE
    kind = kind.strip().lower()

    try:
        timeout = float(config.get("request_timeout", 10.0))
    except (TypeError, ValueError):
        raise ConfigError(f"request_timeout inválido: {config.get('request_timeout')!r}")

    if kind == STORE_SUPABASE:
        if not url or not key:
            raise ConfigError("Supabase selecionado, mas SUPABASE_URL/SUPABASE_ANON_KEY não foram configurados")
        return StoreSettings(kind=kind, supabase_url=url, supabase_key=key, request_timeout=timeout)
    if kind == STORE_SQLITE:
        return StoreSettings(kind=kind, database_path=get_database_path(config), request_timeout=timeout)
    raise ConfigError(f"Armazenamento desconhecido: {kind}")
