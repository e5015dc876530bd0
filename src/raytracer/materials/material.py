# materials/material.py
from typing import Optional, Union
from raytracer.core.color import Color
from raytracer.materials.textures import Texture, SolidTexture

TextureLike = Union[Color, Texture]

def as_texture(value: TextureLike) -> Texture:
    """
    Wraps a plain color into a SolidTexture; textures pass through unchanged.
    """
    if isinstance(value, Color):
        return SolidTexture(value)
    return value

class Material:
    """
    Phong-style surface description.

    Each lighting channel is a texture so that colors can vary across the
    surface; plain Colors are accepted and wrapped in SolidTexture.

    Attributes:
        ambient, diffuse, specular: textures for the three Phong terms.
        normal_map: optional texture whose RGB encodes shading normals.
        shininess: Phong exponent of the specular highlight.
        reflectivity: fraction of the mirror reflection added, clamped to [0, 1].
        gloss: magnitude of the random jitter applied to reflection rays;
            0 gives a perfect mirror.
        gamma: multiplier applied to the final shaded color.
        refractivity: reserved, not used by shading.
    """
    def __init__(self, ambient: TextureLike, diffuse: TextureLike, specular: TextureLike,
                 shininess: float, reflectivity: float = 0.0, gloss: float = 0.0,
                 gamma: float = 1.0, refractivity: float = 0.0,
                 normal_map: Optional[Texture] = None):
        if shininess < 0:
            raise ValueError(f"shininess must be non-negative, got {shininess}")
        self.ambient = as_texture(ambient)
        self.diffuse = as_texture(diffuse)
        self.specular = as_texture(specular)
        self.normal_map = normal_map
        self.shininess = shininess
        self.reflectivity = min(max(reflectivity, 0.0), 1.0)
        self.gloss = max(gloss, 0.0)
        self.gamma = gamma
        self.refractivity = refractivity

    def __repr__(self) -> str:
        return (f"Material(shininess={self.shininess}, reflectivity={self.reflectivity}, "
                f"gloss={self.gloss}, gamma={self.gamma})")
