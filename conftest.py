"""Pytest configuration for test logging."""
from CalcEngine.logging_config import configure_logging

configure_logging("DEBUG")
