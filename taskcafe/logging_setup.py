import logging
import sys

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="INFO") -> None:
    """Attach one stderr handler to the ``taskcafe`` logger.

    Calling it again only updates the level, so reloads and repeated startups
    do not duplicate output.
    """
    logger = logging.getLogger("taskcafe")
    logger.setLevel(level)

    if any(getattr(h, "_taskcafe", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    handler._taskcafe = True
    logger.addHandler(handler)
