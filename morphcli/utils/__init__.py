"""Utility helpers."""
from .image import imread, imsave, resolve_path
from .logger import get_logger
from .timing import Timer

__all__ = ["imread", "imsave", "resolve_path", "get_logger", "Timer"]
