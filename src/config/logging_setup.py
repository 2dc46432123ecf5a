"""
Five-Card Draw - Logging Configuration

Call ``setup_logging`` once at program start (the Streamlit entrypoint does).
Modules log through ``logging.getLogger(__name__)``.
"""

import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure the root logger.

    Args:
        level: Standard level name (``"DEBUG"``, ``"INFO"``, ...)
        debug: Force DEBUG regardless of ``level``
    """
    resolved = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    # Streamlit reruns the script on every interaction; keep the level current.
    logging.getLogger().setLevel(resolved)
