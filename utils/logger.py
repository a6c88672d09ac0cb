# utils/logger.py
import logging
import sys
from config.paths import LOG_PATH
from utils.constants import LOG_LEVEL

LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

logger = logging.getLogger("nurses")
logger.setLevel(LOG_LEVEL)

# streamlit re-executes ui.py on every interaction; attach handlers only once per process
if not logger.handlers:
    file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(module)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # terminal running `invoke front`
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(module)s: %(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    # streamlit's own file watcher is noisy at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)
