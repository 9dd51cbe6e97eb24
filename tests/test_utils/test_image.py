"""
Unit tests for the image I/O helpers.
"""

import os
import pytest
import numpy as np
import cv2

from morphcli.core.errors import ImageLoadError, OutputWriteError
from morphcli.utils.image import imread, imsave, resolve_path


class TestResolvePath:

	def test_existing_file(self, image_file):
		assert os.path.samefile(resolve_path(image_file), image_file)

	def test_missing_file_returned_unchanged(self, tmp_path):
		missing = str(tmp_path / "missing.png")
		assert resolve_path(missing) == missing

	def test_empty(self):
		assert resolve_path("") == ""

	def test_found_on_samples_search_path(self, tmp_path, workdir, sample_image_name):
		assert not (workdir / sample_image_name).exists()

		resolved = resolve_path(sample_image_name)
		assert os.path.samefile(resolved, tmp_path / "samples" / sample_image_name)


class TestImread:

	def test_reads_color(self, image_file, color_image):
		np.testing.assert_array_equal(imread(image_file), color_image)

	def test_missing(self, tmp_path):
		with pytest.raises(ImageLoadError) as excinfo:
			imread(tmp_path / "missing.png")
		assert excinfo.value.path.endswith("missing.png")

	def test_empty_path(self):
		with pytest.raises(ImageLoadError):
			imread("")

	def test_undecodable(self, tmp_path):
		p = tmp_path / "broken.jpg"
		p.write_bytes(b"\x00\x01garbage")
		with pytest.raises(ImageLoadError):
			imread(p)


	def test_reads_from_samples_search_path(self, workdir, sample_image_name, color_image):
		np.testing.assert_array_equal(imread(sample_image_name), color_image)


class TestImsave:

	def test_writes_png(self, tmp_path, color_image):
		path = imsave(tmp_path / "out.png", color_image)

		assert path.exists()
		np.testing.assert_array_equal(cv2.imread(str(path)), color_image)

	def test_unsupported_extension(self, tmp_path, color_image):
		with pytest.raises(OutputWriteError):
			imsave(tmp_path / "out.unknownext", color_image)

	def test_imwrite_returns_false(self, tmp_path, color_image, monkeypatch):
		monkeypatch.setattr(cv2, "imwrite", lambda path, image: False)

		with pytest.raises(OutputWriteError, match="out.png"):
			imsave(tmp_path / "out.png", color_image)
