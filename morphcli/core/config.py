"""
Configuration for the morphology tool.
Holds the fixed parameters of a run and validates them on construction.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


KERNEL_SHAPES = ("rect", "cross", "ellipse", "diamond")
BORDER_POLICIES = ("default", "replicate", "reflect")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MorphConfig:
	"""Complete run configuration."""
	# Structuring element: side length is 2 * morph_size + 1
	morph_size: int = 5
	kernel_shape: str = "rect"

	# Transform settings
	border: str = "default"
	iterations: int = 1

	# Output
	output_path: str = "output.png"

	# Logging
	log_level: str = "WARNING"

	def __post_init__(self):
		if self.morph_size < 0:
			raise ValueError(f"morph_size must be >= 0, got {self.morph_size}")
		if self.kernel_shape not in KERNEL_SHAPES:
			raise ValueError(f"Unknown kernel shape: {self.kernel_shape}")
		if self.border not in BORDER_POLICIES:
			raise ValueError(f"Unknown border policy: {self.border}")
		if self.iterations < 1:
			raise ValueError(f"iterations must be >= 1, got {self.iterations}")
		if not self.output_path:
			raise ValueError("output_path must not be empty")

		self.log_level = self.log_level.upper()
		if self.log_level not in LOG_LEVELS:
			raise ValueError(f"Unknown log level: {self.log_level}")

	@property
	def kernel_side(self) -> int:
		return 2 * self.morph_size + 1

	def to_dict(self) -> Dict[str, Any]:
		return asdict(self)


def get_default_config() -> MorphConfig:
	"""
	Get default run configuration.
	Returns:
		MorphConfig with an 11x11 centred rectangular element and output.png as target
	"""
	return MorphConfig(
		morph_size=5,
		kernel_shape="rect",
		border="default",
		iterations=1,
		output_path="output.png",
		log_level="WARNING"
	)
