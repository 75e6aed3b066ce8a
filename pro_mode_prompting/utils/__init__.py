# pro_mode_prompting/utils/__init__.py
from . import logging, serialization, text

__all__ = ["logging", "serialization", "text"]
