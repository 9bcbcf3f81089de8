import os
import logging

import pytest
import matplotlib.image as mpimg
import matplotlib.pyplot as plt

import network_stats_plot.chart as chart
from network_stats_plot.dataset import read_stats
from network_stats_plot.renderer import (
    render,
    plot,
)
from network_stats_plot.errors import (
    InputNotFound,
    MalformedRow,
    OutputWriteError,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
ROWS = ["1 10 2", "2 20 4", "3 15 3"]


def test_render(write_stats, tmp_path):
    output = tmp_path / "chart.png"

    render(write_stats(ROWS), output)

    assert output.stat().st_size > 0
    assert output.read_bytes()[:8] == PNG_SIGNATURE


def test_render_dimensions(write_stats, tmp_path):
    output = tmp_path / "chart.png"

    render(write_stats(ROWS), output)

    assert mpimg.imread(str(output)).shape[:2] == (1080, 1920)


def test_render_dimensions_do_not_depend_on_input_size(write_stats, tmp_path):
    output = tmp_path / "chart.png"
    rows = [f"{i} {i * 100} {i // 8 + 1} {i // 10}" for i in range(5000)]

    render(write_stats(rows), output)

    assert mpimg.imread(str(output)).shape[:2] == (1080, 1920)


def test_render_twice(write_stats, tmp_path):
    input_path = write_stats(ROWS)
    output = tmp_path / "chart.png"

    render(input_path, output)
    size1 = output.stat().st_size
    render(input_path, output)
    size2 = output.stat().st_size

    assert abs(size1 - size2) <= size1 * 0.01


def test_render_overwrites_output(write_stats, tmp_path):
    output = tmp_path / "chart.png"

    output.write_text("previous content")

    render(write_stats(ROWS), output)

    assert output.read_bytes()[:8] == PNG_SIGNATURE


def test_render_missing_input(tmp_path):
    output = tmp_path / "chart.png"

    with pytest.raises(InputNotFound):
        render(tmp_path / "missing.txt", output)

    assert not output.exists()


def test_render_missing_input_keeps_previous_output(tmp_path):
    output = tmp_path / "chart.png"

    output.write_bytes(b"previous")

    with pytest.raises(InputNotFound):
        render(tmp_path / "missing.txt", output)

    assert output.read_bytes() == b"previous"


def test_render_short_rows(write_stats, tmp_path, caplog):
    output = tmp_path / "chart.png"

    with caplog.at_level(logging.WARNING, logger="network_stats_plot"):
        render(write_stats(ROWS + ["4 40"]), output)

    assert output.read_bytes()[:8] == PNG_SIGNATURE
    assert "line #4" in caplog.text


def test_render_short_rows_strict(write_stats, tmp_path):
    output = tmp_path / "chart.png"

    with pytest.raises(MalformedRow):
        render(write_stats(ROWS + ["4 40"]), output, strict=True)

    assert not output.exists()


def test_render_output_directory_does_not_exist(write_stats, tmp_path):
    input_path = write_stats(ROWS)
    output = tmp_path / "missing" / "chart.png"

    with pytest.raises(OutputWriteError):
        render(input_path, output)

    assert not output.parent.exists()
    assert sorted(os.listdir(tmp_path)) == ["stats.txt"]


def test_render_output_is_directory(write_stats, tmp_path):
    output = tmp_path / "chart.png"

    output.mkdir()

    with pytest.raises(OutputWriteError):
        render(write_stats(ROWS), output)


def test_render_output_symlink_is_followed(write_stats, tmp_path):
    charts = tmp_path / "charts"
    real = charts / "real.png"
    link = tmp_path / "latest.png"

    charts.mkdir()
    real.write_bytes(b"old")
    link.symlink_to(real)

    render(write_stats(ROWS), link)

    assert link.is_symlink()
    assert os.readlink(link) == str(real)
    assert real.read_bytes()[:8] == PNG_SIGNATURE
    assert sorted(os.listdir(charts)) == ["real.png"]
    assert sorted(os.listdir(tmp_path)) == ["charts", "latest.png", "stats.txt"]


def test_render_does_not_leave_temporary_files(write_stats, tmp_path):
    render(write_stats(ROWS), tmp_path / "chart.png")

    assert sorted(os.listdir(tmp_path)) == ["chart.png", "stats.txt"]


def test_plot_series_and_axes(write_stats):
    dataset = read_stats(write_stats(ROWS + ["4 40"]))
    fig = plot(dataset, chart.get_series())

    try:
        ax1, ax2 = fig.axes

        assert [l.get_label() for l in ax1.get_lines()] == ["Network size"]
        assert [l.get_label() for l in ax2.get_lines()] == ["Number of sections"]
        assert ax1.get_lines()[0].get_color() == "red"
        assert ax2.get_lines()[0].get_color() == "blue"
        assert list(ax1.get_lines()[0].get_xdata()) == [1.0, 2.0, 3.0, 4.0]
        assert list(ax2.get_lines()[0].get_xdata()) == [1.0, 2.0, 3.0]

        # Shared x-axis, independent y-axes
        assert ax1.get_shared_x_axes().joined(ax1, ax2)
        assert ax1.yaxis.get_ticks_position() == "left"
        assert ax2.yaxis.get_ticks_position() == "right"

        legend = [t.get_text() for t in ax2.get_legend().get_texts()]

        assert legend == ["Network size", "Number of sections"]
        assert tuple(fig.get_size_inches() * fig.dpi) == (1920, 1080)
    finally:
        plt.close(fig)


def test_plot_complete_sections(write_stats):
    dataset = read_stats(write_stats(["0 10 1 0", "1 25 3 2"]))
    fig = plot(dataset, chart.get_series(plot_complete=True))

    try:
        _, ax2 = fig.axes
        lines = ax2.get_lines()

        assert [l.get_label() for l in lines] == ["Number of sections", "Complete sections"]
        assert lines[1].get_color() == "green"
        assert list(lines[1].get_ydata()) == [0.0, 2.0]
    finally:
        plt.close(fig)


def test_render_closes_figures(write_stats, tmp_path):
    figures = len(plt.get_fignums())

    render(write_stats(ROWS), tmp_path / "chart.png")

    assert len(plt.get_fignums()) == figures
