"""
Parameter sets for curve table generation and the errors raised when they
are out of domain.
"""

import math
import re

from .shapes import EXPONENTIAL, canonical_shape

DEFAULT_MIN = 0
DEFAULT_MAX = 255
DEFAULT_POINTS = 128
DEFAULT_SHAPE = EXPONENTIAL
DEFAULT_CURVATURE = 1.0
MAX_CURVATURE = 5.0
DEFAULT_NAME = "curve"
DEFAULT_PROGMEM_MACRO = "PROGMEM"

MIDPOINT_X_LIMITS = (0.1, 0.9)
MIDPOINT_Y_LIMITS = (0.0, 1.0)

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class CurveError(ValueError):
    pass


class InvalidRange(CurveError):
    pass


class InvalidPointCount(CurveError):
    pass


class InvalidMidpoint(CurveError):
    pass


class InvalidCurvature(CurveError):
    pass


class InvalidShape(CurveError):
    pass


class InvalidArrayName(CurveError):
    pass


class CurveParams:
    """
    Shape settings for one table.

    `midpoint` is None for a single curve, or an (x, y) tuple which switches
    to two segments joined at that point; the *_right fields only apply then.
    """

    def __init__(self, shape=DEFAULT_SHAPE, curvature=DEFAULT_CURVATURE, invert=False,
                 midpoint=None, shape_right=DEFAULT_SHAPE, curvature_right=DEFAULT_CURVATURE,
                 invert_right=False):
        self.shape = shape
        self.curvature = curvature
        self.invert = invert
        self.midpoint = midpoint
        self.shape_right = shape_right
        self.curvature_right = curvature_right
        self.invert_right = invert_right

    @property
    def use_midpoint(self):
        return self.midpoint is not None

    def __repr__(self):
        if not self.use_midpoint:
            return f"CurveParams({self.shape}, c={self.curvature}, invert={self.invert})"
        return (f"CurveParams({self.shape}, c={self.curvature}, invert={self.invert}, "
                f"midpoint={self.midpoint}, {self.shape_right}, c={self.curvature_right}, "
                f"invert={self.invert_right})")


class RangeSpec:
    def __init__(self, min_value=DEFAULT_MIN, max_value=DEFAULT_MAX, num_points=DEFAULT_POINTS):
        self.min_value = min_value
        self.max_value = max_value
        self.num_points = num_points

    def __repr__(self):
        return f"RangeSpec({self.min_value}..{self.max_value}, n={self.num_points})"


class ArrayOptions:
    """Name and qualifiers of the emitted array. PROGMEM forces const."""

    def __init__(self, name=DEFAULT_NAME, add_const=True, add_progmem=False,
                 progmem_macro=DEFAULT_PROGMEM_MACRO):
        self.name = name
        self.add_progmem = add_progmem
        self.add_const = add_const or add_progmem
        self.progmem_macro = progmem_macro

    def __repr__(self):
        return (f"ArrayOptions({self.name!r}, const={self.add_const}, "
                f"progmem={self.add_progmem})")


def _check_curvature(c, label):
    if isinstance(c, bool) or not isinstance(c, (int, float)):
        raise InvalidCurvature(f"{label} must be a number, got {c!r}")
    if not math.isfinite(c) or not (0 < c <= MAX_CURVATURE):
        raise InvalidCurvature(f"{label} must lie in (0, {MAX_CURVATURE}], got {c}")


def _check_shape(name, label):
    shape = canonical_shape(name)
    if shape is None:
        raise InvalidShape(f"{label}: unknown shape {name!r}")
    return shape


def validate_curve(params):
    """
    Check a CurveParams and return a copy with canonical shape names.
    The argument is left untouched.
    """
    shape = _check_shape(params.shape, "shape")
    _check_curvature(params.curvature, "curvature")
    if not params.use_midpoint:
        return CurveParams(shape, params.curvature, params.invert)
    shape_right = _check_shape(params.shape_right, "shape_right")
    _check_curvature(params.curvature_right, "curvature_right")
    try:
        mx, my = params.midpoint
    except (TypeError, ValueError):
        raise InvalidMidpoint(f"midpoint must be an (x, y) pair, got {params.midpoint!r}")
    if not (0.0 < mx < 1.0):
        raise InvalidMidpoint(f"midpoint x must lie strictly inside (0, 1), got {mx}")
    if not (0.0 <= my <= 1.0):
        raise InvalidMidpoint(f"midpoint y must lie inside [0, 1], got {my}")
    return CurveParams(shape, params.curvature, params.invert, midpoint=(mx, my),
                       shape_right=shape_right, curvature_right=params.curvature_right,
                       invert_right=params.invert_right)


def validate_range(spec):
    for label, v in (("min", spec.min_value), ("max", spec.max_value)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidRange(f"{label} must be an integer, got {v!r}")
    if spec.max_value <= spec.min_value:
        raise InvalidRange(f"max ({spec.max_value}) must be greater than min ({spec.min_value})")
    n = spec.num_points
    if isinstance(n, bool) or not isinstance(n, int) or n < 2:
        raise InvalidPointCount(f"need at least 2 points, got {spec.num_points}")
    return spec


def validate_options(options):
    if not isinstance(options.name, str) or not _IDENT_RE.match(options.name):
        raise InvalidArrayName(f"array name must be a C identifier, got {options.name!r}")
    if options.add_progmem and not _IDENT_RE.match(options.progmem_macro or ""):
        raise InvalidArrayName(f"storage macro must be a C identifier, got {options.progmem_macro!r}")
    return options


def clamp_midpoint(x, y):
    """Clamp a midpoint the way an interactive editor pins the drag handle."""
    x = max(MIDPOINT_X_LIMITS[0], min(MIDPOINT_X_LIMITS[1], x))
    y = max(MIDPOINT_Y_LIMITS[0], min(MIDPOINT_Y_LIMITS[1], y))
    return x, y
