"""
Unit tests for the scoped timer.
"""

import time
import pytest

from morphcli.utils.timing import Timer


def test_measures_block():
	with Timer() as timer:
		time.sleep(0.01)

	assert timer.elapsed >= 0.009
	assert timer.microseconds >= 9000
	assert isinstance(timer.microseconds, int)


def test_zero_before_use():
	timer = Timer()
	assert timer.elapsed == 0.0
	assert timer.microseconds == 0


def test_exception_propagates_and_time_recorded():
	timer = Timer()
	with pytest.raises(RuntimeError):
		with timer:
			raise RuntimeError("boom")

	assert timer.elapsed >= 0
