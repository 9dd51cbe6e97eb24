"""Error types raised by the morphology tool."""


class MorphError(Exception):
	"""Base class for all morphology tool errors."""


class UsageError(MorphError):
	"""Wrong argument count or unparseable arguments."""


class ImageLoadError(MorphError):
	"""The input path does not resolve to a decodable image."""

	def __init__(self, path: str):
		super().__init__(f"Could not load image: {path}")
		self.path = path


class InvalidOperationError(MorphError):
	"""Operation name is not one of the supported operations."""

	def __init__(self, name: str):
		super().__init__(f"Invalid morph operation: {name!r}")
		self.name = name


class OutputWriteError(MorphError):
	"""The result image could not be written."""

	def __init__(self, path: str, reason: str = ""):
		message = f"Could not write image: {path}"
		if reason:
			message = f"{message} ({reason})"
		super().__init__(message)
		self.path = path
