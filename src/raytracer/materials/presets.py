# materials/presets.py
from raytracer.core.color import Color
from raytracer.materials.material import Material
from raytracer.materials.textures import CheckerTexture

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    PURPLE = Color(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.1, 0.1, 0.1)

class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def default() -> Material:
        return Material(Color(0.7, 0.7, 0.7), Color(0.7, 0.7, 0.7), Color(0.1, 0.1, 0.1), 2.0)

    @staticmethod
    def matte(color: Color) -> Material:
        """Create a matte material with the given color."""
        return Material(color, color, Color(0.1, 0.1, 0.1), 2.0)

    @staticmethod
    def plastic(color: Color) -> Material:
        return Material(color, color, Color(0.6, 0.6, 0.6), 32.0, reflectivity=0.1)

    @staticmethod
    def mirror() -> Material:
        return Material(Color(0.1, 0.1, 0.1), Color(0.1, 0.1, 0.1), Color(1.0, 1.0, 1.0),
                        100.0, reflectivity=0.65)

    @staticmethod
    def brushed_metal(gloss: float = 0.2) -> Material:
        return Material(Color(0.15, 0.15, 0.15), Color(0.3, 0.3, 0.3), Color(0.9, 0.9, 0.9),
                        50.0, reflectivity=0.5, gloss=gloss)

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None, cell_size: float = 0.1) -> Material:
        """Create a matte checkerboard material with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        checker = CheckerTexture(color1, color2, cell_size)
        return Material(checker, checker, Color(0.1, 0.1, 0.1), 2.0)
