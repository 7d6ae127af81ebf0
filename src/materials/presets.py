# materials/presets.py
from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric


class MattePresets:
    """Diffuse materials used by the demo scenes."""

    @staticmethod
    def gray() -> Lambertian:
        return Lambertian(Color(0.5, 0.5, 0.5))

    @staticmethod
    def ground() -> Lambertian:
        return Lambertian(Color(0.8, 0.8, 0.0))

    @staticmethod
    def blue() -> Lambertian:
        return Lambertian(Color(0.1, 0.2, 0.5))

    @staticmethod
    def brown() -> Lambertian:
        return Lambertian(Color(0.4, 0.2, 0.1))


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=0.0)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)

    @staticmethod
    def bronze() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_gold() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=1.0)


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
