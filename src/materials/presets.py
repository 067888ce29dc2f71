# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.checkers import Checkers
from materials.light import Light

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34))

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88))

    @staticmethod
    def steel() -> Metal:
        return Metal(Vector3(0.5, 0.5, 0.5))

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class LightPresets:
    """Predefined light sources with different colors and intensities."""

    @staticmethod
    def white_light(intensity: float = 1.0) -> Light:
        return Light(Vector3(1.0, 1.0, 1.0) * intensity)

    @staticmethod
    def warm_light(intensity: float = 1.0) -> Light:
        return Light(Vector3(1.0, 0.95, 0.9) * intensity)

class ColorPresets:
    """Common color presets for materials."""

    RED = Vector3(1.0, 0.0, 0.0)
    GREEN = Vector3(0.0, 1.0, 0.0)
    BLUE = Vector3(0.0, 0.0, 1.0)
    YELLOW = Vector3(1.0, 1.0, 0.0)
    GOLD = Vector3(1.0, 215 / 255.0, 0.0)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None, scale: float = 2.0) -> Checkers:
        if color1 is None:
            color1 = ColorPresets.RED
        if color2 is None:
            color2 = ColorPresets.YELLOW
        return Checkers(color1, color2, scale)
