import logging
from colorlog import ColoredFormatter
from expense_ledger.core.settings import settings

LOG_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(name)s:%(reset)s %(message)s"
DEBUG_LOG_FORMAT = (
    "%(log_color)s[%(asctime)s] [%(levelname)-8s] "
    "%(reset)s%(blue)s%(name)s:%(reset)s %(message)s"
)


def build_logger(name: str, level: str, debug: bool = False) -> logging.Logger:
    """
    Colored stderr logger; stdout is left to the command output.

    With ``debug`` on the level drops to DEBUG and lines carry a timestamp.
    """
    formatter = ColoredFormatter(
        DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
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

    log = logging.getLogger(name)
    log.setLevel("DEBUG" if debug else level)
    log.handlers[:] = [handler]
    log.propagate = False
    return log


logger = build_logger(settings.APP_NAME, settings.LOG_LEVEL, settings.DEBUG)
