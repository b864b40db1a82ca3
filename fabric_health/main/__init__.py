"""Main layer: settings and startup wiring."""

from .bootstrap import bootstrap
from .config import AppSettings, get_settings

__all__ = ["AppSettings", "bootstrap", "get_settings"]
