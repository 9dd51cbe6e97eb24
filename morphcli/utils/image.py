"""Image I/O helpers."""
from pathlib import Path
from typing import Union
import numpy as np
import cv2

from ..core.errors import ImageLoadError, OutputWriteError

PathLike = Union[str, Path]


def resolve_path(path: PathLike) -> str:
	"""
	Resolve an input path, consulting OpenCV's sample search path.
	Args:
		path: Path as given on the command line
	Returns:
		Resolved path, or the original path when the search finds nothing
	"""
	path = str(path)
	if not path:
		return path
	try:
		found = cv2.samples.findFile(path, False, True)
	except cv2.error:
		found = ""
	return found or path


def imread(path: PathLike, flags: int = cv2.IMREAD_COLOR) -> np.ndarray:
	"""
	Load an image from disk.
	Args:
		path: Image path
		flags: OpenCV imread flags (default: colour)
	Returns:
		Loaded image
	Raises:
		ImageLoadError: If the file is missing, unreadable or not an image
	"""
	resolved = resolve_path(path)
	image = cv2.imread(resolved, flags) if resolved else None
	if image is None or image.size == 0:
		raise ImageLoadError(str(path))
	return image


def imsave(path: PathLike, image: np.ndarray) -> Path:
	"""
	Write an image to disk, overwriting any existing file.
	Args:
		path: Output path; the extension selects the format
		image: Image to write
	Returns:
		Path written
	Raises:
		OutputWriteError: If OpenCV fails to encode or write the file
	"""
	path = Path(path)
	try:
		ok = cv2.imwrite(str(path), image)
	except cv2.error as e:
		raise OutputWriteError(str(path), str(e)) from e
	if not ok:
		raise OutputWriteError(str(path))
	return path
