import pytest
from PIL import Image


@pytest.fixture
def image_file(tmp_path):
    """Write an image to disk and return its path."""

    def _write(image: Image.Image, name: str = "image.png"):
        path = tmp_path / name
        image.save(path)
        return path

    return _write
