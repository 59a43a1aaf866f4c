"""
Climagro - Climate Anomaly Alerts

This package fetches daily point climate series from NASA POWER and flags
abnormal conditions (heat, cold, frost, heavy rain, drought) for coffee
farming decision support.
"""

__version__ = "0.1.0"
__description__ = "Climate anomaly alerts for coffee farming"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "ClimagroApp":
        from .main import ClimagroApp
        return ClimagroApp
    if name == "analyze":
        from .algorithms import analyze
        return analyze
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ClimagroApp",
    "analyze",
]
