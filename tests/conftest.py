import pytest
from PIL import Image


@pytest.fixture
def png_file(tmp_path):
    """Write a solid-colour PNG and return its path."""

    def _make(size=(4, 4), colour=(255, 0, 0), name="image.png"):
        path = tmp_path / name
        Image.new("RGB", size, colour).save(path)
        return path

    return _make


@pytest.fixture
def noisy_png(tmp_path):
    """A PNG large enough that its base64 spans several kitty chunks."""
    path = tmp_path / "noise.png"
    Image.effect_noise((128, 128), 64).convert("RGB").save(path)
    return path


@pytest.fixture
def corrupt_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"this is not an image")
    return path
