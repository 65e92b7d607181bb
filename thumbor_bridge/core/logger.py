import logging
from colorlog import ColoredFormatter

LOG_FORMAT = (
    "%(log_color)s[%(asctime)s] [%(levelname)-8s] "
    "%(reset)s%(blue)s%(name)s:%(reset)s %(message)s"
)

formatter = ColoredFormatter(
    LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    reset=True,
    log_colors={
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    },
)

handler = logging.StreamHandler()
handler.setFormatter(formatter)

logger = logging.getLogger("thumbor_bridge")
logger.addHandler(handler)
logger.propagate = False


def configure_logging(level: str):
    logger.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    # Module loggers under thumbor_bridge.* share the handler above
    return logging.getLogger(name)
