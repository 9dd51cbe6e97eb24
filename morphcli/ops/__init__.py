"""Morphological operations."""
from .morphology import make_structuring_element, apply_morphology

__all__ = ["make_structuring_element", "apply_morphology"]
