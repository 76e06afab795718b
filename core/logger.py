# logger.py
# Logger da aplicação

import logging
import os
import sys
from datetime import datetime

LOGGER_NAME = "alfaiataria"
logger = logging.getLogger(LOGGER_NAME)

def get_app_data_dir():
    """Retorna o diretório AppData do usuário para logs"""
    if sys.platform == 'win32':
        app_data = os.getenv('LOCALAPPDATA', os.getenv('APPDATA', ''))
        if app_data:
            log_dir = os.path.join(app_data, 'Alfaiataria', 'logs')
        else:
            # Fallback para pasta do executável
            log_dir = os.path.join(os.path.dirname(sys.executable if getattr(sys, 'frozen', False) else __file__), '..', 'logs')
    else:
        # Linux/Mac
        log_dir = os.path.expanduser('~/.alfaiataria/logs')

    os.makedirs(log_dir, exist_ok=True)
    return log_dir

def setup_logging(log_dir: str | None = None, level: int = logging.INFO) -> str:
    """
    Configura arquivo de log diário + saída no console.
    Chamado uma vez pelo ponto de entrada; retorna o caminho do arquivo.
    """
    log_dir = log_dir or get_app_data_dir()
    log_path = os.path.join(log_dir, f'alfaiataria_{datetime.now().strftime("%Y%m%d")}.log')

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', '%Y-%m-%d %H:%M:%S'))

    # Adiciona também saída no console para debug
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', '%H:%M:%S'))

    logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.setLevel(level)
    return log_path

def log_event(msg: str):
    """Registra evento informativo"""
    logger.info(msg)

def log_error(msg: str, exc: Exception = None):
    """Registra erro com traceback opcional"""
    if exc:
        logger.error(f"{msg}: {str(exc)}", exc_info=exc)
    else:
        logger.error(msg)

def log_warning(msg: str):
    """Registra aviso"""
    logger.warning(msg)

def log_debug(msg: str):
    """Registra mensagem de debug"""
    logger.debug(msg)

def log_startup(log_path: str, store_kind: str):
    """Registra informações de inicialização do sistema"""
    logger.info("="*60)
    logger.info("ALFAIATARIA - MEDIDAS DE CLIENTES")
    logger.info("="*60)
    logger.info(f"Versão Python: {sys.version}")
    logger.info(f"Sistema Operacional: {sys.platform}")
    logger.info(f"Executável: {sys.executable if getattr(sys, 'frozen', False) else 'Script Python'}")
    logger.info(f"Armazenamento: {store_kind}")
    logger.info(f"Arquivo de log: {log_path}")
    logger.info("="*60)
