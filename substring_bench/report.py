# report.py
# Human-readable report, JSON export and timing chart for a benchmark run.

import json
import logging
import sys

import matplotlib.ticker as mticker
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .config import TIME_PRECISION

log = logging.getLogger(__name__)


def format_header(book_count, pattern_count):
    return (
        "Substring search algorithm comparison\n"
        f"Processing {book_count} books with {pattern_count} patterns:\n"
    )


def format_book_report(corpus, records, precision=TIME_PRECISION):
    """One book's section: each pattern followed by a line per algorithm."""
    lines = [f"\nProcessing: {corpus}"]
    current = None
    for r in records:
        if r.pattern != current:
            current = r.pattern
            lines.append(f'\nPattern: "{r.pattern}"')
        lines.append(f"  {r.algorithm}: {r.matches} matches, {r.seconds:.{precision}f} s")
    return "\n".join(lines) + "\n"


def print_header(book_count, pattern_count, stream=None):
    stream = sys.stdout if stream is None else stream
    stream.write(format_header(book_count, pattern_count))
    stream.flush()


def print_book_report(corpus, records, stream=None, precision=TIME_PRECISION):
    """Writes one book's section as soon as it is done."""
    stream = sys.stdout if stream is None else stream
    stream.write(format_book_report(corpus, records, precision))
    stream.flush()


def export_json(run, output_path):
    """Saves every record plus the skipped books and any disagreements."""
    report_data = {
        "patterns": run.patterns,
        "processed": run.processed,
        "skipped": run.skipped,
        "mismatches": [
            {"corpus": m.corpus, "pattern": m.pattern, "algorithms": list(m.algorithms)}
            for m in run.mismatches
        ],
        "results": [r.to_dict() for r in run.records],
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report_data, f, indent=4)
    log.info("JSON report saved to %s", output_path)
    return output_path


def summarize(run):
    """
    Totals over all books.

    Returns (patterns, algorithms, seconds, matches) where
    ``seconds[algorithm][i]`` is the time spent on ``patterns[i]`` and
    ``matches[i]`` the match count reported by the first algorithm.
    """
    patterns = list(run.patterns)
    algorithms = []
    seconds = {}
    matches = [0] * len(patterns)
    index = {p: i for i, p in enumerate(patterns)}

    for r in run.records:
        if r.algorithm not in seconds:
            algorithms.append(r.algorithm)
            seconds[r.algorithm] = [0.0] * len(patterns)
        i = index[r.pattern]
        seconds[r.algorithm][i] += r.seconds
        if r.algorithm == algorithms[0]:
            matches[i] += r.matches

    return patterns, algorithms, seconds, matches


def plot_timings(run, output_path):
    """Grouped bar chart of time per pattern and algorithm, with match counts on a second axis."""
    fig = Figure(figsize=(10, 5), dpi=100)
    FigureCanvasAgg(fig)
    ax1 = fig.add_subplot(111)

    patterns, algorithms, seconds, matches = summarize(run)
    if not algorithms:
        ax1.set_title("No Performance Data to Display")
        fig.savefig(output_path)
        return output_path

    positions = list(range(len(patterns)))
    width = 0.8 / len(algorithms)
    for k, name in enumerate(algorithms):
        offsets = [p - 0.4 + width * (k + 0.5) for p in positions]
        ax1.bar(offsets, seconds[name], width=width, label=name)

    ax1.set_xticks(positions)
    ax1.set_xticklabels(patterns, rotation=20, ha="right")
    ax1.set_ylabel("Execution Time (s)")
    ax1.set_title("Algorithm Performance Comparison")
    ax1.legend(loc="upper left")

    ax2 = ax1.twinx()
    ax2.plot(positions, matches, color="red", marker="o", linestyle="--", label="Matches")
    ax2.set_ylabel("Total Matches", color="red")
    ax2.tick_params(axis="y", labelcolor="red")
    ax2.get_yaxis().set_major_formatter(
        mticker.FuncFormatter(lambda x, p: format(int(x), ","))
    )

    fig.tight_layout()
    fig.savefig(output_path)
    log.info("Chart saved to %s", output_path)
    return output_path
