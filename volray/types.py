"""Scalar types of the volume ray tracer and the run options."""

from __future__ import annotations

import struct
from dataclasses import dataclass

# Struct format codes of the scalar types stored in scenes and ray sets.
POS_T = "I"
DIR_T = "h"
DIFF_T = "h"
IORLOG_T = "i"
IOR_T = "I"
BRIGHTNESS_T = "I"
TRANSLUCENCY_T = "I"
SIZE_T = "Q"
FLOAT_T = "f"

_FLOAT32 = struct.Struct("<f")


def _as_float32(value: float) -> float:
    """Round a number to the nearest single precision value."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


@dataclass(frozen=True)
class ValueFormat:
    """How a stored scalar maps to a real number.

    Fixed point formats divide by ``unit_value``; floating point formats
    have a unit of one.
    """

    code: str
    unit_value: float
    tolerance: float

    def to_double(self, value):
        """Return the real value in double precision."""
        return float(value) / float(self.unit_value)

    def to_float(self, value):
        """Return the real value computed in single precision."""
        return _as_float32(_as_float32(value) / _as_float32(self.unit_value))


IOR_FIXED = ValueFormat(code=IOR_T, unit_value=0x10000, tolerance=1 / 0x10000)
IOR_FLOAT = ValueFormat(code=FLOAT_T, unit_value=1.0, tolerance=0.0)
DIR_FIXED = ValueFormat(code=DIR_T, unit_value=0x100, tolerance=1 / 0x100)
DIR_FLOAT = ValueFormat(code=FLOAT_T, unit_value=1.0, tolerance=0.0)
POS_FLOAT = ValueFormat(code=FLOAT_T, unit_value=1.0, tolerance=0.0)


@dataclass
class Options:
    """Settings that control a tracing run."""

    loglevel: int = 0
    minimum_gpu: int = 0x80
    write_instance: bool = False
    max_cpu: int = 256