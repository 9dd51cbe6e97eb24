"""
Morphological transforms for colour images.
This module builds structuring elements and applies OpenCV's dilation and erosion primitives through a single parametrized entry point.
"""

import logging
from typing import Union
import numpy as np
import cv2

from ..core.base import Operation, StructuringElement, MorphResult
from ..utils.timing import Timer

logger = logging.getLogger(__name__)


KERNEL_SHAPES = {
	'rect': cv2.MORPH_RECT,
	'ellipse': cv2.MORPH_ELLIPSE,
	'cross': cv2.MORPH_CROSS,
	'diamond': None
}

# 'default' makes out-of-image positions neutral: they never win the max (dilate) or the min (erode)
BORDER_TYPES = {
	'default': cv2.BORDER_CONSTANT,
	'replicate': cv2.BORDER_REPLICATE,
	'reflect': cv2.BORDER_REFLECT_101
}


def _diamond_kernel(morph_size: int) -> np.ndarray:
	"""L1 ball of radius morph_size: |dx| + |dy| <= morph_size."""
	side = 2 * morph_size + 1
	y, x = np.ogrid[:side, :side]
	return ((np.abs(x - morph_size) + np.abs(y - morph_size)) <= morph_size).astype(np.uint8)


def make_structuring_element(morph_size: int = 5, shape: str = 'rect') -> StructuringElement:
	"""
	Create a square structuring element anchored at its centre.
	'rect' is the L-infinity ball of radius morph_size, 'diamond' the L1 ball.
	Args:
		morph_size: Half-width of the element; the side is 2 * morph_size + 1
		shape: Kernel shape ('rect', 'ellipse', 'cross', 'diamond')
	Returns:
		Read-only StructuringElement
	Raises:
		ValueError: If the size is negative or the shape is unknown
	"""
	if shape not in KERNEL_SHAPES:
		raise ValueError(f"Unknown kernel shape: {shape}")
	if morph_size < 0:
		raise ValueError(f"morph_size must be >= 0, got {morph_size}")

	side = 2 * morph_size + 1
	anchor = (morph_size, morph_size)
	if shape == 'diamond':
		kernel = _diamond_kernel(morph_size)
	else:
		kernel = cv2.getStructuringElement(KERNEL_SHAPES[shape], (side, side), anchor)
	return StructuringElement(kernel=kernel, anchor=anchor, shape=shape)


def apply_morphology(
	image: np.ndarray,
	operation: Union[Operation, str],
	element: StructuringElement,
	border: str = 'default',
	iterations: int = 1
) -> MorphResult:
	"""
	Apply dilation or erosion to an image.
	Dilation takes the per-channel maximum under the element footprint, erosion the per-channel minimum.
	Only the OpenCV primitive call is timed.
	Args:
		image: Input image (grayscale or multi-channel); not modified
		operation: Operation member or its name
		element: Structuring element
		border: Border policy ('default', 'replicate', 'reflect')
		iterations: Number of times the primitive is applied
	Returns:
		MorphResult with the new image and the elapsed time
	Raises:
		ValueError: If the image is empty or the border policy is unknown
		InvalidOperationError: If an operation name is not supported
	"""
	if image is None or image.size == 0:
		raise ValueError("Input image is empty or None")
	if border not in BORDER_TYPES:
		raise ValueError(f"Unknown border policy: {border}")

	if isinstance(operation, str):
		operation = Operation.from_name(operation)

	border_type = BORDER_TYPES[border]
	border_value = cv2.morphologyDefaultBorderValue()
	kernel = element.kernel.copy()

	with Timer() as timer:
		output = operation.primitive(
			image,
			kernel,
			anchor=element.anchor,
			iterations=iterations,
			borderType=border_type,
			borderValue=border_value
		)

	logger.debug(
		f"{operation.value}: {image.shape} with {element.shape} "
		f"{element.size[0]}x{element.size[1]} in {timer.microseconds} us"
	)

	return MorphResult(
		image=output,
		operation=operation,
		element=element,
		processing_time=timer.elapsed
	)
