# core/utils.py
import math
from core.vector import Vector3

# Upper bound on rejection-sampling draws before falling back to a
# deterministic point pulled inside the unit ball.
MAX_REJECTION_TRIES = 100
_INSIDE_SCALE = 0.999


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def clamp(x: float, minimum: float, maximum: float) -> float:
    if x < minimum:
        return minimum
    if x > maximum:
        return maximum
    return x


def random_double(rng, minimum: float = 0.0, maximum: float = 1.0) -> float:
    """
    Returns a uniform float in [minimum, maximum) drawn from rng.
    """
    return minimum + (maximum - minimum) * rng.random()


def _pull_inside(p: Vector3) -> Vector3:
    l = p.length()
    if l == 0:
        return p
    return p * (_INSIDE_SCALE / l)


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    p = Vector3(0, 0, 0)
    for _ in range(MAX_REJECTION_TRIES):
        p = Vector3(random_double(rng, -1, 1),
                    random_double(rng, -1, 1),
                    random_double(rng, -1, 1))
        if p.length_squared() < 1.0:
            return p
    return _pull_inside(p)


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point (x, y, 0) inside the unit disk, for lens sampling.
    """
    p = Vector3(0, 0, 0)
    for _ in range(MAX_REJECTION_TRIES):
        p = Vector3(random_double(rng, -1, 1), random_double(rng, -1, 1), 0)
        if p.length_squared() < 1.0:
            return p
    return _pull_inside(p)


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Snell's law in vector form. uv and n must be unit length.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
