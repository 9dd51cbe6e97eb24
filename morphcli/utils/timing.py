"""Scoped wall-clock timer."""
import time
from typing import Optional


class Timer:
	"""
	Context manager measuring the wall-clock time of the enclosed block.
	Example:
		>>> with Timer() as timer:
		...     result = cv2.dilate(image, kernel)
		>>> timer.microseconds
	"""

	def __init__(self):
		self._start: Optional[float] = None
		self.elapsed: float = 0.0

	def __enter__(self) -> 'Timer':
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> bool:
		self.elapsed = time.perf_counter() - self._start
		return False

	@property
	def microseconds(self) -> int:
		return int(self.elapsed * 1_000_000)
