# materials/texture_loader.py
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from raytracer.materials.textures import ImageTexture
from raytracer.utils.logger import logger

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, converting it to RGB.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the file cannot be decoded as an image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    texture = ImageTexture(data)
    logger.debug("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture
