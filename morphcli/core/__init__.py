"""Core package for pipeline, configuration and shared types."""
from .base import Operation, StructuringElement, MorphResult
from .config import MorphConfig, get_default_config
from .errors import (
	MorphError,
	UsageError,
	ImageLoadError,
	InvalidOperationError,
	OutputWriteError
)
from .pipeline import MorphPipeline

__all__ = [
	"Operation", "StructuringElement", "MorphResult",
	"MorphConfig", "get_default_config",
	"MorphError", "UsageError", "ImageLoadError", "InvalidOperationError", "OutputWriteError",
	"MorphPipeline"
]
