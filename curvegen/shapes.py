"""
shapes.py

Normalized shaping functions over t in [0,1]. Every family maps 0 -> 0 and
1 -> 1 for curvature in (0,5].

  parabolic          t^(2c)
  exponential        t for c == 1, t^c for c > 1, t^(1/(2-c)) for c < 1
  doubleExponential  (t^c)^c
  sigmoid            logistic with k = 2c, rescaled so s(0)=0 and s(1)=1

In two-segment mode exponential is always t^c.
"""

import math

PARABOLIC = "parabolic"
EXPONENTIAL = "exponential"
DOUBLE_EXPONENTIAL = "doubleExponential"
SIGMOID = "sigmoid"

SHAPES = (PARABOLIC, EXPONENTIAL, DOUBLE_EXPONENTIAL, SIGMOID)

SHAPE_ALIASES = {
    "parabolic": PARABOLIC,
    "exponential": EXPONENTIAL,
    "doubleexponential": DOUBLE_EXPONENTIAL,
    "double_exponential": DOUBLE_EXPONENTIAL,
    "double-exponential": DOUBLE_EXPONENTIAL,
    "sigmoid": SIGMOID,
}


def canonical_shape(name):
    """Return the canonical shape name for `name`, or None if unknown."""
    if not isinstance(name, str):
        return None
    return SHAPE_ALIASES.get(name.strip().lower())


def parabolic(t, c):
    return math.pow(t, 2 * c)


def exponential(t, c):
    if c == 1:
        return t
    if c > 1:
        return math.pow(t, c)
    return math.pow(t, 1 / (2 - c))


def exponential_segment(t, c):
    return math.pow(t, c)


def double_exponential(t, c):
    return math.pow(math.pow(t, c), c)


def sigmoid(t, c):
    k = c * 2
    s = 1 / (1 + math.exp(-k * (t - 0.5)))
    lo = 1 / (1 + math.exp(k * 0.5))
    hi = 1 / (1 + math.exp(-k * 0.5))
    if hi == lo:
        # k too small to resolve; the limit is linear
        return t
    return (s - lo) / (hi - lo)


_SINGLE = {
    PARABOLIC: parabolic,
    EXPONENTIAL: exponential,
    DOUBLE_EXPONENTIAL: double_exponential,
    SIGMOID: sigmoid,
}

_SEGMENT = dict(_SINGLE)
_SEGMENT[EXPONENTIAL] = exponential_segment


def evaluate(shape, curvature, t, segment=False):
    """
    Evaluate one shape family at t.

    `segment` selects the two-segment table, which differs from the
    single-curve one only for exponential.
    """
    table = _SEGMENT if segment else _SINGLE
    try:
        fn = table[shape]
    except KeyError:
        raise ValueError(f"unknown shape: {shape!r}")
    return fn(t, curvature)


def apply_segment(shape, curvature, invert, local_t, segment=False):
    """
    Evaluate a shape with optional inversion.

    Inversion reflects the curve through (0.5, 0.5): the input is flipped
    before evaluation and the output is flipped after it.
    """
    x = 1 - local_t if invert else local_t
    y = evaluate(shape, curvature, x, segment=segment)
    return 1 - y if invert else y


def describe_curvature(c):
    if c < 1:
        return "gentle"
    if c > 1:
        return "steep"
    return "linear"
