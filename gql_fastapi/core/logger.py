"""
Logging Setup
──────────────────────────────────────────────────────────────────────────
Configures the root logger once from Settings and hands out named loggers.
"""

import logging
import os
from typing import Optional

from gql_fastapi.core.pydanticConfig.settings import Settings, get_settings

_configured = False


def configure_logging(cfg: Optional[Settings] = None) -> None:
    """Install stream (and optional file) handlers on the root logger."""
    global _configured
    if _configured:
        return

    cfg = cfg or get_settings()
    handlers = [logging.StreamHandler()]
    if cfg.LOG_FILE:
        log_dir = os.path.dirname(cfg.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(cfg.LOG_FILE))

    logging.basicConfig(
        level=getattr(logging, cfg.LOG_LEVEL.upper(), logging.INFO),
        format=cfg.LOG_FORMAT,
        handlers=handlers,
    )
    _configured = True


def setup_logger(name: str, cfg: Optional[Settings] = None) -> logging.Logger:
    configure_logging(cfg)
    return logging.getLogger(name)
