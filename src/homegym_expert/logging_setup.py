import logging

from .config import SETTINGS

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int | str | None = None) -> None:
    """
    Set up root logger with a stream handler.

    The level defaults to ``SETTINGS.LOG_LEVEL``. Calling this again once the
    root logger has handlers is a no-op.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # already configured
    root.setLevel(level if level is not None else SETTINGS.LOG_LEVEL)
    fmt = logging.Formatter(LOG_FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)
