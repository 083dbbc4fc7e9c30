# core/logger.py
import logging
from tripplanner.core.config import settings

logger = logging.getLogger("tripplanner")
logger.setLevel(settings.LOG_LEVEL.upper())

console_handler = logging.StreamHandler()
formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s")
console_handler.setFormatter(formatter)

# Reloads (uvicorn --reload, test collection) must not stack handlers
if not logger.handlers:
    logger.addHandler(console_handler)
