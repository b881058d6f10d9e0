# ============================================================================
# FILE: app/core/logging.py
# ============================================================================
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger with a single console handler"""
    from app.config import settings

    level_name = (level or settings.LOG_LEVEL).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid stacking handlers when the app module is reloaded
    for handler in list(root.handlers):
        if getattr(handler, "_app_handler", False):
            root.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._app_handler = True
    root.addHandler(console_handler)

    # SQL echo is noisy; keep it behind DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
    return root
