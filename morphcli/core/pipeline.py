"""
Pipeline for a single morphology run.
This module coordinates loading the input image, selecting the operation, applying the transform and writing the result.
"""

from pathlib import Path
from typing import Callable, Optional, Union
import numpy as np
import logging

from .base import Operation, StructuringElement, MorphResult
from .config import MorphConfig


logger = logging.getLogger(__name__)


class MorphPipeline:
	"""
	Linear load -> transform -> write workflow.
	Steps run in this order, each failure ending the run:
	1. Image loading (ImageLoadError)
	2. Operation selection (InvalidOperationError)
	3. Morphological transform
	4. Output writing (OutputWriteError)
	Example:
		>>> from morphcli.core.pipeline import MorphPipeline
		>>>
		>>> pipeline = MorphPipeline()
		>>> result = pipeline.run("lena.jpg", "erode")
		>>> result.microseconds
	"""

	def __init__(self, config: Optional[MorphConfig] = None):
		"""
		Initialize the pipeline.
		Args:
			config: Run configuration (defaults to get_default_config())
		"""
		from .config import get_default_config

		self.config = config or get_default_config()
		logger.debug(f"Initialized pipeline with config: {self.config.to_dict()}")

	def build_element(self) -> StructuringElement:
		"""Build a fresh structuring element from the configuration."""
		from ..ops.morphology import make_structuring_element

		return make_structuring_element(self.config.morph_size, self.config.kernel_shape)

	def load(self, input_path: Union[str, Path]) -> np.ndarray:
		from ..utils.image import imread

		image = imread(input_path)
		logger.info(f"Loaded {input_path}: {image.shape[1]}x{image.shape[0]}, {image.shape[2] if image.ndim == 3 else 1} channel(s)")
		return image

	def transform(self, image: np.ndarray, operation: Union[Operation, str]) -> MorphResult:
		"""
		Apply the configured transform.
		Args:
			image: Input image
			operation: Operation member or name
		Returns:
			MorphResult
		"""
		from ..ops.morphology import apply_morphology

		return apply_morphology(
			image,
			operation,
			self.build_element(),
			border=self.config.border,
			iterations=self.config.iterations
		)

	def write(self, result: MorphResult) -> Path:
		from ..utils.image import imsave

		path = imsave(self.config.output_path, result.image)
		logger.info(f"Wrote {path}")
		return path

	def run(
		self,
		input_path: Union[str, Path],
		operation: Union[Operation, str] = Operation.DILATE,
		on_transformed: Optional[Callable[[MorphResult], None]] = None
	) -> MorphResult:
		"""
		Run the complete workflow.
		Args:
			input_path: Input image path
			operation: Operation member or name (default: dilate)
			on_transformed: Called with the result after the transform, before writing
		Returns:
			MorphResult of the transform; the image has been written to config.output_path
		Raises:
			ImageLoadError: If the input cannot be loaded
			InvalidOperationError: If the operation name is not supported
			OutputWriteError: If the result cannot be written
		"""
		image = self.load(input_path)

		if not isinstance(operation, Operation):
			operation = Operation.from_name(operation)

		result = self.transform(image, operation)
		if on_transformed is not None:
			on_transformed(result)

		self.write(result)
		return result
