"""Single entry point from parameters to table values and source text."""

from .emit import fmt_c_array, select_type
from .params import ArrayOptions, validate_curve, validate_options, validate_range
from .sampler import sample_curve


def generate(params, spec, options=None):
    """
    Validate, sample and format one table.

    Returns a dict with "data_type", "values" and "source_text". Raises a
    CurveError subclass on invalid input; values that overflow the chosen
    type are passed through (see emit.out_of_type_range).
    """
    if options is None:
        options = ArrayOptions()
    validate_range(spec)
    curve = validate_curve(params)
    validate_options(options)

    values = sample_curve(curve, spec)
    ctype = select_type(spec.min_value, spec.max_value)
    text = fmt_c_array(ctype, options.name, values, add_const=options.add_const,
                       progmem_macro=options.progmem_macro if options.add_progmem else None)
    return {"data_type": ctype, "values": values, "source_text": text}
