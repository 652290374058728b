import matplotlib.pyplot as plt

from .sampler import midpoint_index


def plot_curve(values, filename="curve_preview.png", min_value=None, max_value=None,
               midpoint=None, title=None):
    """Save an index -> value chart of a table; marks the midpoint sample if given."""
    if not values:
        print("No values to preview.")
        return None
    lo = min(values) if min_value is None else min_value
    hi = max(values) if max_value is None else max_value

    plt.figure(figsize=(10, 4))
    plt.plot(range(len(values)), values, 'b-', linewidth=2)
    if midpoint is not None:
        idx = midpoint_index(len(values), midpoint[0])
        plt.plot(idx, values[idx], 'o', color='#1E3A8A', markersize=12, alpha=0.75)
    plt.grid(True, linestyle='--', alpha=0.4)
    plt.xlim(0, len(values) - 1)
    if hi > lo:
        plt.ylim(lo, hi)
    plt.xlabel("Index")
    plt.ylabel("Value")
    plt.title(title or f"{len(values)} points, {lo}..{hi}")
    plt.savefig(filename)
    plt.close()
    print(f"Preview saved to {filename}")
    return filename
