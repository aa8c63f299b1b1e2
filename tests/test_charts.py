from charts import build_performance_figure, save_performance_chart
from algorithms.run_all import run_all_algorithms


def test_empty_performance_figure():
    fig = build_performance_figure({})
    assert fig.axes[0].get_title() == "No Performance Data to Display"


def test_figure_has_time_and_comparison_axes():
    performance = run_all_algorithms("abracadabra" * 10, ["abra"])
    fig = build_performance_figure(performance)

    ax1, ax2 = fig.axes
    assert len(ax1.patches) == len(performance)
    assert ax1.get_ylabel() == "Execution Time (ms)"
    assert ax2.get_ylabel() == "Total Comparisons"


def test_save_chart(tmp_path):
    performance = {
        "Naive": {"time": 1.5, "comparisons": 1200},
        "Boyer-Moore": {"time": 0.4, "comparisons": 300},
    }
    path = tmp_path / "chart.png"
    save_performance_chart(performance, str(path))
    assert path.read_bytes().startswith(b"\x89PNG")
