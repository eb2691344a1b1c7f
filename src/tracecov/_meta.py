from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("tracecov")

logger = logging.getLogger("tracecov")

__all__ = ["__version__", "logger"]
