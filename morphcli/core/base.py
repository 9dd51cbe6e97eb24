"""
Core types for the morphology tool.
This module defines the operation enumeration, the structuring element and the result container shared by the pipeline and the command-line interface.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Tuple
import numpy as np
import cv2

from .errors import InvalidOperationError


class Operation(Enum):
	"""Enumeration of supported morphological operations."""
	ERODE = "erode"
	DILATE = "dilate"

	@classmethod
	def from_name(cls, name: str) -> 'Operation':
		"""
		Look up an operation by its command-line name.
		Args:
			name: Operation name ('dilate' or 'erode')
		Returns:
			Matching Operation member
		Raises:
			InvalidOperationError: If the name is not supported
		"""
		for member in cls:
			if member.value == name:
				return member
		raise InvalidOperationError(name)

	@property
	def primitive(self) -> Callable[..., np.ndarray]:
		"""OpenCV function implementing this operation."""
		if self is Operation.DILATE:
			return cv2.dilate
		return cv2.erode

	@classmethod
	def names(cls) -> Tuple[str, ...]:
		return tuple(member.value for member in cls)


@dataclass(frozen=True, eq=False)
class StructuringElement:
	"""
	Read-only morphological kernel.
	The kernel is copied on construction and the copy is marked read-only.
	Elements compare equal when anchor, shape name and kernel contents match.
	Attributes:
		kernel: uint8 kernel array (non-zero entries belong to the footprint)
		anchor: (x, y) anchor point inside the kernel
		shape: Shape name ('rect', 'cross', 'ellipse', 'diamond')
	"""
	kernel: np.ndarray
	anchor: Tuple[int, int]
	shape: str = "rect"

	def __post_init__(self):
		kernel = np.array(self.kernel, dtype=np.uint8)
		if kernel.ndim != 2 or kernel.size == 0:
			raise ValueError(f"Kernel must be a non-empty 2D array, got shape {kernel.shape}")

		height, width = kernel.shape
		x, y = self.anchor
		if not (0 <= x < width and 0 <= y < height):
			raise ValueError(f"Anchor {self.anchor} lies outside kernel of size {width}x{height}")

		kernel.flags.writeable = False
		object.__setattr__(self, 'kernel', kernel)
		object.__setattr__(self, 'anchor', (int(x), int(y)))

	def _key(self) -> Tuple[Any, ...]:
		return (self.anchor, self.shape, self.kernel.shape, self.kernel.tobytes())

	def __eq__(self, other):
		if not isinstance(other, StructuringElement):
			return NotImplemented
		return self._key() == other._key()

	def __hash__(self):
		return hash(self._key())

	@property
	def size(self) -> Tuple[int, int]:
		"""Kernel size as (width, height)."""
		return (self.kernel.shape[1], self.kernel.shape[0])


@dataclass
class MorphResult:
	"""
	Container for a morphological transform and its timing.
	Attributes:
		image: Transformed image, same shape and dtype as the input
		operation: Operation applied
		element: Structuring element used
		processing_time: Time taken by the primitive in seconds
	"""
	image: np.ndarray
	operation: Operation
	element: StructuringElement
	processing_time: float = 0.0

	@property
	def microseconds(self) -> int:
		return int(self.processing_time * 1_000_000)
