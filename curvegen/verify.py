"""
verify.py

Read the arrays back out of a generated header and plot them, to check a
table visually after it has been written.
"""

import argparse
import re
import sys
from pathlib import Path

import matplotlib.pyplot as plt

ARRAY_RE = re.compile(
    r"(?:const\s+)?(u?int(?:8|16|32)_t)\s+(\w+)\[(\d+)\]\s*(?:\w+\s*)?=\s*\{(.*?)\};",
    re.DOTALL)


def parse_header(text):
    """Return {name: (ctype, values)} for every integer array in `text`."""
    arrays = {}
    for ctype, name, size, body in ARRAY_RE.findall(text):
        values = [int(v) for v in re.findall(r"-?\d+", body)]
        if len(values) != int(size):
            raise ValueError(f"{name}: declared {size} values, found {len(values)}")
        arrays[name] = (ctype, values)
    return arrays


def verify_header(path, out_png="curve_verification.png"):
    arrays = parse_header(Path(path).read_text())
    if not arrays:
        print(f"No arrays found in {path}")
        return arrays

    plt.figure(figsize=(10, 4))
    for name, (ctype, values) in arrays.items():
        plt.plot(range(len(values)), values, '-', label=f"{name} ({ctype})")
    plt.legend()
    plt.grid(True, linestyle='--', alpha=0.4)
    plt.title(f"Table verification - {Path(path).name}")
    plt.savefig(out_png)
    plt.close()
    print(f"Verified {len(arrays)} table(s), image saved to {out_png}")
    return arrays


def main(argv=None):
    p = argparse.ArgumentParser(description="Plot the tables found in a generated header")
    p.add_argument("header")
    p.add_argument("--out", "-o", default="curve_verification.png")
    args = p.parse_args(argv)
    try:
        verify_header(args.header, args.out)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
