# bouncesnake/__init__.py
from .config import AppConfig

__all__ = ["AppConfig"]
__version__ = "0.1.0"
