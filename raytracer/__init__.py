"""A small ray tracer: tuples, matrices, spheres, lights, a world, a camera and PPM output."""

__version__ = "0.1.0"