"""Shaping curves to integer lookup tables for embedded firmware."""

from .config import ConfigError
from .emit import emit_header, fmt_c_array, out_of_type_range, select_type
from .generate import generate
from .params import (ArrayOptions, CurveError, CurveParams, InvalidArrayName,
                     InvalidCurvature, InvalidMidpoint, InvalidPointCount,
                     InvalidRange, InvalidShape, RangeSpec)
from .sampler import sample_curve

__version__ = "0.1.0"
