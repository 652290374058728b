"""
sampler.py

Turns curve parameters into a table of integers: evenly spaced t over
[0,1], shaped per segment, scaled into [min,max] and rounded half up.
Values are not clamped.
"""

import math

from .shapes import apply_segment


def round_half_up(x):
    """Round to nearest integer, ties toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(x + 0.5))


def sample_positions(num_points):
    return [i / (num_points - 1) for i in range(num_points)]


def normalized_value(t, params):
    if not params.use_midpoint:
        return apply_segment(params.shape, params.curvature, params.invert, t)

    mid_x, mid_y = params.midpoint
    if t <= mid_x:
        local_t = t / mid_x
        y = apply_segment(params.shape, params.curvature, params.invert, local_t, segment=True)
        return y * mid_y
    local_t = (t - mid_x) / (1 - mid_x)
    y = apply_segment(params.shape_right, params.curvature_right, params.invert_right,
                      local_t, segment=True)
    return mid_y + y * (1 - mid_y)


def sample_normalized(params, num_points):
    return [normalized_value(t, params) for t in sample_positions(num_points)]


def sample_curve(params, spec):
    """Return `spec.num_points` integers. Inputs are assumed validated."""
    span = spec.max_value - spec.min_value
    return [round_half_up(spec.min_value + span * y)
            for y in sample_normalized(params, spec.num_points)]


def midpoint_index(num_points, mid_x):
    """Index of the sample drawn as the midpoint handle."""
    return round_half_up((num_points - 1) * mid_x)
