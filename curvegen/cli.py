#!/usr/bin/env python3
"""
cli.py

Generate a C/C++ lookup table from a shaping curve.

  curvegen --min 0 --max 255 --points 128 --shape sigmoid --curvature 2.5
  curvegen --midpoint 0.3 0.8 --shape parabolic --shape-right exponential -o curve.h
  curvegen --preset tables.json -o tables.h --preview curve.png

Without --out the array declaration is printed to stdout; with --out a
PROGMEM-friendly header is written. Status lines go to stderr.
"""

import argparse
import sys
from pathlib import Path

from . import params as P
from .config import load_presets
from .emit import emit_header, header_guard, out_of_type_range
from .generate import generate
from .shapes import SHAPES, canonical_shape, describe_curvature


def build_parser():
    p = argparse.ArgumentParser(prog="curvegen",
                                description="Generate a lookup table array from a shaping curve")
    p.add_argument("--min", type=int, default=P.DEFAULT_MIN, dest="min_value")
    p.add_argument("--max", type=int, default=P.DEFAULT_MAX, dest="max_value")
    p.add_argument("--points", "-n", type=int, default=P.DEFAULT_POINTS)
    p.add_argument("--shape", default=P.DEFAULT_SHAPE, help=f"one of {', '.join(SHAPES)}")
    p.add_argument("--curvature", "-c", type=float, default=P.DEFAULT_CURVATURE)
    p.add_argument("--invert", action="store_true", help="Flip the (first) curve")
    p.add_argument("--midpoint", type=float, nargs=2, metavar=("X", "Y"),
                   help="Join two curves at (X, Y); X clamped to [0.1, 0.9], Y to [0, 1]")
    p.add_argument("--shape-right", default=P.DEFAULT_SHAPE)
    p.add_argument("--curvature-right", type=float, default=P.DEFAULT_CURVATURE)
    p.add_argument("--invert-right", action="store_true")
    p.add_argument("--name", default=P.DEFAULT_NAME)
    p.add_argument("--no-const", action="store_true")
    p.add_argument("--progmem", action="store_true", help="Place the table in flash (implies const)")
    p.add_argument("--progmem-macro", default=P.DEFAULT_PROGMEM_MACRO)
    p.add_argument("--preset", help="JSON file with one or more table definitions "
                   "(cannot be combined with the per-table flags above)")
    p.add_argument("--out", "-o", help="Write a header file instead of printing the array")
    p.add_argument("--preview", help="Save a PNG chart of the (first) table")
    return p


TABLE_FLAGS = (
    ("min_value", "--min"), ("max_value", "--max"), ("points", "--points"),
    ("shape", "--shape"), ("curvature", "--curvature"), ("invert", "--invert"),
    ("midpoint", "--midpoint"), ("shape_right", "--shape-right"),
    ("curvature_right", "--curvature-right"), ("invert_right", "--invert-right"),
    ("name", "--name"), ("no_const", "--no-const"), ("progmem", "--progmem"),
)


def tables_from_args(args):
    if args.preset:
        return load_presets(args.preset, progmem_macro=args.progmem_macro)
    midpoint = P.clamp_midpoint(*args.midpoint) if args.midpoint else None
    curve = P.CurveParams(shape=args.shape, curvature=args.curvature, invert=args.invert,
                          midpoint=midpoint, shape_right=args.shape_right,
                          curvature_right=args.curvature_right, invert_right=args.invert_right)
    spec = P.RangeSpec(args.min_value, args.max_value, args.points)
    options = P.ArrayOptions(name=args.name, add_const=not args.no_const,
                             add_progmem=args.progmem, progmem_macro=args.progmem_macro)
    return [(curve, spec, options)]


def run(args):
    results = []
    for curve, spec, options in tables_from_args(args):
        res = generate(curve, spec, options)
        label = describe_curvature(curve.curvature)
        print(f"{options.name}: {res['data_type']}[{spec.num_points}], "
              f"{canonical_shape(curve.shape)} ({label})", file=sys.stderr)
        bad = out_of_type_range(res["values"], res["data_type"])
        if bad:
            print(f"Warning: {options.name}: {len(bad)} value(s) do not fit {res['data_type']}",
                  file=sys.stderr)
        results.append((curve, spec, options, res))

    if args.out:
        out = Path(args.out)
        arrays = [(r["data_type"], o.name, r["values"], o.add_const, o.add_progmem)
                  for _, _, o, r in results]
        out.write_text(emit_header(arrays, guard=header_guard(out.name),
                                   progmem_macro=args.progmem_macro))
        print(f"Generated header: {out}", file=sys.stderr)
    else:
        print("\n\n".join(r["source_text"] for _, _, _, r in results))

    if args.preview:
        from .preview import plot_curve
        curve, spec, options, res = results[0]
        plot_curve(res["values"], args.preview, spec.min_value, spec.max_value,
                   midpoint=curve.midpoint, title=options.name)
    return results


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    if args.preset:
        given = [flag for dest, flag in TABLE_FLAGS if getattr(args, dest) != p.get_default(dest)]
        if given:
            p.error(f"--preset cannot be combined with {', '.join(given)}")
    try:
        run(args)
    except (P.CurveError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
