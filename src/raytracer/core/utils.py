# core/utils.py
from raytracer.core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere, drawn from `rng`
    (anything with a uniform(low, high) method).
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        # The origin itself cannot be normalized
        if 0.0 < p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def perturb_reflection(reflected: Vector3, gloss: float, rng, cutoff: float = 0.1) -> Vector3:
    """
    Jitters a unit reflection direction by a random unit vector scaled by
    `gloss`. Samples that end up with dot(sample, reflected) <= cutoff
    (about 84 degrees off the mirror direction) are redrawn.
    """
    while True:
        sample = (reflected + random_unit_vector(rng) * gloss).normalize()
        if sample.dot(reflected) > cutoff:
            return sample
