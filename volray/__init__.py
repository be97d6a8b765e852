"""Fixed-point formats, binary serialization, small-vector math, integer and sequence helpers, and harmonic relaxation."""

__version__ = "0.1.0"
__all__ = ["types", "serialize", "harmonic", "vector", "intmath", "sequences"]