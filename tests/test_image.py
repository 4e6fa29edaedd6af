# tests/test_image.py
import io
import numpy as np
import pytest
from PIL import Image
from mangrove_backend.services.image_service import ImageService
from mangrove_backend.utils.exceptions import ImageDecodeError
from conftest import make_image

@pytest.mark.parametrize('mode,size,color', [
    ('RGB', (640, 480), (10, 200, 30)),
    ('RGBA', (300, 200), (255, 0, 0, 0)),
    ('L', (20, 35), 128),
    ('P', (150, 150), 3),
    ('LA', (1, 1), (90, 255)),
])
def test_preprocess_always_returns_150x150_rgb(mode, size, color):
    pixels = ImageService().preprocess(make_image(mode, size, color))
    assert pixels.shape == (150, 150, 3)
    assert pixels.dtype == np.uint8

def test_preprocess_drops_alpha_and_keeps_colour():
    pixels = ImageService().preprocess(make_image('RGBA', (64, 64), (255, 0, 0, 40)))
    assert pixels[..., 0].min() >= 250
    assert pixels[..., 1].max() <= 5
    assert pixels[..., 2].max() <= 5

def test_preprocess_reads_jpeg():
    pixels = ImageService().preprocess(make_image('RGB', (500, 500), (0, 0, 255), fmt='JPEG'))
    assert pixels.shape == (150, 150, 3)

def test_preprocess_rejects_garbage():
    with pytest.raises(ImageDecodeError):
        ImageService().preprocess(b'definitely not an image')

def test_preprocess_rejects_empty_upload():
    with pytest.raises(ImageDecodeError):
        ImageService().preprocess(b'')

def three_band_image(size, horizontal):
    """Red, green and blue thirds along the long side of the image."""
    img = Image.new('RGB', size)
    width, height = size
    for i, colour in enumerate([(255, 0, 0), (0, 255, 0), (0, 0, 255)]):
        if horizontal:
            box = (i * width // 3, 0, (i + 1) * width // 3, height)
        else:
            box = (0, i * height // 3, width, (i + 1) * height // 3)
        img.paste(colour, box)
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()

@pytest.mark.parametrize('size,horizontal', [((300, 100), True), ((100, 300), False)])
def test_preprocess_crops_to_centre_instead_of_stretching(size, horizontal):
    pixels = ImageService().preprocess(three_band_image(size, horizontal)).astype(int)

    # Scaling the short side to 150 leaves only the green middle band in frame
    inner = pixels[10:140, 10:140]
    assert inner[..., 1].min() >= 240
    assert inner[..., 0].max() <= 15
    assert inner[..., 2].max() <= 15
