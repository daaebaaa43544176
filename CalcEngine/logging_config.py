"""Centralized logging configuration."""
import logging


def configure_logging(level: str = "WARNING"):
    """Configure logging for the engine and the terminal runner."""
    log_level = getattr(logging, str(level).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    logging.getLogger("CalcEngine").setLevel(log_level)
    logging.getLogger().setLevel(log_level)
