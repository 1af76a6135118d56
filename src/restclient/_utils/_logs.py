import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("restclient")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    """Configure the ``restclient`` logger.

    Args:
        should_debug: Log at DEBUG level when True, INFO otherwise.
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
