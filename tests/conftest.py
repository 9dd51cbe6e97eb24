import logging
import pytest
import numpy as np
import cv2


@pytest.fixture
def color_image():
	"""Deterministic 40x50 BGR image with blocks and noise."""
	rng = np.random.default_rng(0)
	img = rng.integers(0, 256, size=(40, 50, 3), dtype=np.uint8)
	img[10:20, 10:30] = [30, 120, 250]
	return img


@pytest.fixture
def solid_image():
	"""Uniform 10x10 colour image."""
	img = np.empty((10, 10, 3), dtype=np.uint8)
	img[:] = [40, 90, 200]
	return img


@pytest.fixture
def image_file(tmp_path, color_image):
	p = tmp_path / "input.png"
	cv2.imwrite(str(p), color_image)
	return p


@pytest.fixture
def workdir(tmp_path, monkeypatch):
	"""Run inside an empty working directory."""
	d = tmp_path / "work"
	d.mkdir()
	monkeypatch.chdir(d)
	return d


@pytest.fixture(autouse=True)
def reset_package_logger():
	"""Drop handlers bound to per-test capture streams."""
	yield
	logger = logging.getLogger("morphcli")
	for handler in list(logger.handlers):
		logger.removeHandler(handler)
	logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_image_name(tmp_path, color_image):
	"""Name of an image reachable only through OpenCV's samples search path."""
	samples = tmp_path / "samples"
	samples.mkdir()
	name = f"sample_{tmp_path.name}.png"
	cv2.imwrite(str(samples / name), color_image)
	cv2.samples.addSamplesDataSearchPath(str(samples))
	return name
