import logging
import sys

from cloudvision.config import LOG_DATETIME_FORMAT, LOG_FORMAT, LOG_LEVEL

# By default python prints to stderr and has no date format in logs
# users can override this behaviour by configuring the logger themselves after importing cloudvision
_formatter: logging.Formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATETIME_FORMAT)
_handler: logging.StreamHandler = logging.StreamHandler(sys.stdout)
_handler.setLevel(LOG_LEVEL)
_handler.setFormatter(_formatter)


# modules do `logging.getLogger(__name__)` and inherit from this logger
logger: logging.Logger = logging.getLogger("cloudvision")
logger.setLevel(LOG_LEVEL)
logger.addHandler(_handler)
