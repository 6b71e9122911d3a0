import argparse
import random
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from game.pegs import PALETTE
from game.ruleset import configure
from game.secret_code import generate_pattern


def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
    """
    Annotate points (x, y) on ax with formatted y values.

    Args:
        ax: matplotlib Axes
        xs: list of x coordinates
        ys: list of y coordinates
        fmt: format string for y values
        dx: x offset in points
        dy: y offset in points
        fontsize: font size for annotations
    """

    for x, y in zip(xs, ys):
        if y is None:
            continue
        ax.annotate(
            fmt.format(y),
            (x, y),
            textcoords="offset points",
            xytext=(dx, dy),
            ha="center",
            va="center",
            fontsize=fontsize,
        )


def sample_patterns(config, trials, seed=None, progress=False):
    """
    Generate `trials` hidden patterns and count colors per slot.

    Returns:
      counts (np.ndarray[int], shape (slot_count, color_count)): how often
        each color landed in each slot
      repeat_games (int): patterns that contain a repeated color
    """
    rng = random.Random(seed)
    index = {c: i for i, c in enumerate(PALETTE)}
    counts = np.zeros((config.slot_count, config.color_count), dtype=np.int64)
    repeat_games = 0

    for t in range(trials):
        pattern = generate_pattern(
            config.slot_count, config.color_count, config.allow_repeats, rng
        )
        for slot, color in enumerate(pattern):
            counts[slot, index[color]] += 1
        if len(set(pattern)) != len(pattern):
            repeat_games += 1
        if progress and (t + 1) % 1000 == 0:
            progress_print(f"sampled {t + 1}/{trials}")

    if progress:
        progress_print("")
    return counts, repeat_games


def compute_distribution_stats(counts):
    """
    Returns:
      freqs (np.ndarray[float]): per-slot color frequencies (rows sum to 1)
      expected (float): the uniform frequency 1 / color_count
      max_deviation (float): largest |freq - expected| over all cells
    """
    totals = counts.sum(axis=1, keepdims=True)
    freqs = np.divide(counts, totals, out=np.zeros(counts.shape), where=totals > 0)
    expected = 1.0 / counts.shape[1]
    max_deviation = float(np.max(np.abs(freqs - expected))) if counts.size else np.nan
    return freqs, expected, max_deviation


def plot_distribution(counts, config, out_path, repeat_games=0):
    """Save a grouped bar chart of per-slot color frequencies."""
    freqs, expected, max_dev = compute_distribution_stats(counts)
    trials = int(counts[0].sum()) if counts.size else 0

    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    fig, ax = plt.subplots(figsize=(10, 6))
    x = np.arange(config.slot_count)
    width = 0.8 / config.color_count
    for ci, color in enumerate(config.colors):
        ax.bar(
            x + ci * width,
            freqs[:, ci],
            width,
            label=color.name.title(),
            color=color.name.lower(),
            edgecolor="black",
            linewidth=0.5,
        )
    ax.axhline(expected, linestyle="--", color="gray", label="Uniform")
    _annotate_points(ax, [x[-1] + 0.8], [expected], fmt="{:.3f}", dy=8)

    ax.set_title(
        f"Color frequency per slot ({trials} patterns, "
        f"repeats {'on' if config.allow_repeats else 'off'})\n"
        f"max deviation {max_dev:.4f}, patterns with repeats: {repeat_games}"
    )
    ax.set_xlabel("Slot")
    ax.set_ylabel("Frequency")
    ax.set_xticks(x + 0.4 - width / 2)
    ax.set_xticklabels([str(i + 1) for i in x])
    ax.grid(True, axis="y")
    ax.legend(ncol=2)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out_path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot hidden pattern color distribution.")
    ap.add_argument("--slots", type=int, default=4)
    ap.add_argument("--colors", type=int, default=6)
    ap.add_argument("--repeats", action="store_true")
    ap.add_argument("--trials", type=int, default=10000)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    args = ap.parse_args(argv)

    config = configure(args.slots, args.colors, args.repeats)
    counts, repeat_games = sample_patterns(config, args.trials, args.seed, progress=True)
    _, _, max_dev = compute_distribution_stats(counts)

    out = Path(args.outdir) / (
        f"{config.slot_count}slots_{config.color_count}colors_"
        f"{'repeats' if config.allow_repeats else 'unique'}.png"
    )
    plot_distribution(counts, config, out, repeat_games)
    print(f"Max deviation from uniform: {max_dev:.4f}")
    print(f"Patterns with repeated colors: {repeat_games}/{args.trials}")
    print(f"Saved {out}")


if __name__ == "__main__":
    main()
