# charts.py
# Renders the algorithm performance comparison as a matplotlib figure.

import matplotlib.ticker as mticker
from matplotlib.figure import Figure

BG_COLOR = "#ffffff"
FG_COLOR = "#000000"
BAR_COLOR = "blue"
LINE_COLOR = "red"


def _style_axes(ax, left_color):
    ax.set_facecolor(BG_COLOR)
    ax.tick_params(axis='x', colors=FG_COLOR)
    ax.spines['left'].set_color(left_color)
    ax.spines['bottom'].set_color(FG_COLOR)
    ax.spines['top'].set_color(BG_COLOR)
    ax.spines['right'].set_color(BG_COLOR)


def build_performance_figure(performance, title="Algorithm Performance Comparison"):
    """Builds a bar (time) + line (comparisons) chart.

    performance maps an algorithm name to a dict with "time" (ms) and
    "comparisons", as returned by algorithms.run_all.run_all_algorithms.
    """
    fig = Figure(figsize=(6, 4), dpi=100)
    fig.patch.set_facecolor(BG_COLOR)
    ax1 = fig.add_subplot(111)

    if not performance:
        ax1.set_title("No Performance Data to Display", color=FG_COLOR)
        ax1.tick_params(axis='y', colors=FG_COLOR)
        _style_axes(ax1, FG_COLOR)
        return fig

    algo_names = list(performance)
    times = [performance[name]["time"] for name in algo_names]
    comparisons = [performance[name]["comparisons"] for name in algo_names]

    ax1.bar(algo_names, times, color=BAR_COLOR, label='Time (ms)')
    ax1.set_ylabel('Execution Time (ms)', color=BAR_COLOR)
    ax1.tick_params(axis='y', labelcolor=BAR_COLOR, colors=FG_COLOR)
    ax1.set_title(title, color=FG_COLOR)
    _style_axes(ax1, FG_COLOR)

    ax2 = ax1.twinx()
    ax2.plot(algo_names, comparisons, color=LINE_COLOR, marker='o', linestyle='--', label='Comparisons')
    ax2.set_ylabel('Total Comparisons', color=LINE_COLOR)
    ax2.tick_params(axis='y', labelcolor=LINE_COLOR, colors=LINE_COLOR)

    # comparisons are counts, keep the ticks integral
    ax2.yaxis.set_major_locator(mticker.MaxNLocator(integer=True))
    ax2.yaxis.set_major_formatter(
        mticker.FuncFormatter(lambda x, p: format(int(x), ','))
    )

    ax2.spines['left'].set_color(BG_COLOR)
    ax2.spines['bottom'].set_color(BG_COLOR)
    ax2.spines['top'].set_color(BG_COLOR)
    ax2.spines['right'].set_color(LINE_COLOR)

    fig.tight_layout()
    return fig


def save_performance_chart(performance, path, title="Algorithm Performance Comparison"):
    """Writes the performance chart to path (format taken from the extension)."""
    fig = build_performance_figure(performance, title=title)
    fig.savefig(path, facecolor=fig.get_facecolor())
    return path
