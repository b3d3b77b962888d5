"""Top-level package for per-operation timing statistics."""

from importlib.metadata import version

from loguru import logger

from .config import TimerConfig
from .schemas import OperationStats
from .timer import TimerStats
from .units import TimeUnit

# silent until the application opts in via setup_logging or logger.enable
logger.disable("timerstats")

__all__ = ["__version__", "OperationStats", "TimeUnit", "TimerConfig", "TimerStats"]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return version("timer-stats")
        except Exception:  # pragma: no cover - fallback when pkg metadata missing
            return "0.1.0"
    raise AttributeError(name)
