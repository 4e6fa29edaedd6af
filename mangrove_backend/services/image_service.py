# mangrove_backend/services/image_service.py
import io
import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError
from ..utils.exceptions import ImageDecodeError

class ImageService:
    def __init__(self, size=150):
        self.size = size

    def preprocess(self, data):
        """Turn uploaded image bytes into a (size, size, 3) uint8 pixel buffer.

        The image is scaled to cover the square frame and the overflow is
        cropped around the center. Any alpha channel is dropped, and palette
        and greyscale images are expanded to RGB.
        """
        try:
            with Image.open(io.BytesIO(data)) as img:
                img = img.convert('RGB')
                img = ImageOps.fit(img, (self.size, self.size), method=Image.Resampling.LANCZOS)
                return np.asarray(img, dtype=np.uint8)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeError(f"Could not decode image: {str(e)}")
