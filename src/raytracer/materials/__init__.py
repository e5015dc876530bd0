from .textures import Texture, SolidTexture, CheckerTexture, ImageTexture
from .material import Material
from .texture_loader import load_texture

__all__ = ["Texture", "SolidTexture", "CheckerTexture", "ImageTexture", "Material", "load_texture"]
