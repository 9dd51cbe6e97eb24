"""Top-level package for the morphology command-line tool.

Expose the `core` subpackage for convenience.
"""
from .core import *

__version__ = "0.1.0"

__all__ = ["MorphPipeline", "MorphConfig", "Operation", "StructuringElement", "MorphResult"]
