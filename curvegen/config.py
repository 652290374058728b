"""
Preset loader. Reads table definitions from a JSON file.

A file holds either a single table object or {"tables": [...]}. Keys:
    name, min, max, points, shape, curvature, invert,
    midpoint ({"x": .., "y": ..} or [x, y]),
    shape_right, curvature_right, invert_right, const, progmem
Missing keys fall back to the command line defaults.
"""
import json
from pathlib import Path

from . import params as P

TABLE_KEYS = {
    "name", "min", "max", "points", "shape", "curvature", "invert", "midpoint",
    "shape_right", "curvature_right", "invert_right", "const", "progmem",
}


class ConfigError(P.CurveError):
    pass


def _midpoint(raw):
    if raw is None:
        return None
    if isinstance(raw, dict):
        try:
            x, y = raw["x"], raw["y"]
        except KeyError as e:
            raise ConfigError(f"midpoint is missing {e.args[0]!r}")
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        x, y = raw
    else:
        raise ConfigError(f"midpoint must be {{x, y}} or [x, y], got {raw!r}")
    try:
        return P.clamp_midpoint(float(x), float(y))
    except (TypeError, ValueError):
        raise ConfigError(f"midpoint coordinates must be numbers, got {raw!r}")


def _flag(d, key, default):
    v = d.get(key, default)
    if not isinstance(v, bool):
        raise ConfigError(f"{key} must be true or false, got {v!r}")
    return v


def table_from_dict(d, progmem_macro=P.DEFAULT_PROGMEM_MACRO):
    """Build (CurveParams, RangeSpec, ArrayOptions) from one table object."""
    if not isinstance(d, dict):
        raise ConfigError(f"table entry must be an object, got {type(d).__name__}")
    unknown = set(d) - TABLE_KEYS
    if unknown:
        raise ConfigError(f"unknown table keys: {', '.join(sorted(unknown))}")

    curve = P.CurveParams(
        shape=d.get("shape", P.DEFAULT_SHAPE),
        curvature=d.get("curvature", P.DEFAULT_CURVATURE),
        invert=_flag(d, "invert", False),
        midpoint=_midpoint(d.get("midpoint")),
        shape_right=d.get("shape_right", P.DEFAULT_SHAPE),
        curvature_right=d.get("curvature_right", P.DEFAULT_CURVATURE),
        invert_right=_flag(d, "invert_right", False),
    )
    spec = P.RangeSpec(d.get("min", P.DEFAULT_MIN), d.get("max", P.DEFAULT_MAX),
                       d.get("points", P.DEFAULT_POINTS))
    options = P.ArrayOptions(name=d.get("name", P.DEFAULT_NAME),
                             add_const=_flag(d, "const", True),
                             add_progmem=_flag(d, "progmem", False),
                             progmem_macro=progmem_macro)
    return curve, spec, options


def load_presets(path, progmem_macro=P.DEFAULT_PROGMEM_MACRO):
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        raise ConfigError(f"preset file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})")

    tables = data.get("tables", [data]) if isinstance(data, dict) else data
    if not isinstance(tables, list) or not tables:
        raise ConfigError(f"{path}: no tables defined")

    out = [table_from_dict(t, progmem_macro=progmem_macro) for t in tables]
    names = [o.name for _, _, o in out]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ConfigError(f"{path}: duplicate table names: {', '.join(dupes)}")
    return out
