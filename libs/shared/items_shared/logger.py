
"""
items_shared.logger
-------------------
Logger simple y consistente entre servicios. Nivel tomado de LOG_LEVEL.
Synopsis: created by emeday 2025
"""
import logging, os, sys
from typing import Optional

def get_logger(name: str, service_name: Optional[str]=None, level: Optional[str]=None) -> logging.Logger:
    """
    Devuelve un logger configurado.
    Solo instala el handler la primera vez; llamadas siguientes reutilizan el mismo.
    El nivel se cambia solo si se pasa `level` explícito.
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level.upper())
    if not logger.handlers:
        if not level:
            logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
        handler = logging.StreamHandler(sys.stdout)
        fmt = "[%(asctime)s] [%(levelname)s]"
        if service_name:
            fmt += f" [{service_name}]"
        fmt += " %(name)s: %(message)s"
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
