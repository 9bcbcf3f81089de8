
import os
import logging
import tempfile

import network_stats_plot.utils.utils as utils
import network_stats_plot.chart as chart
from network_stats_plot.dataset import (
    read_stats,
    log_last_sample,
)
from network_stats_plot.errors import OutputWriteError

import matplotlib
matplotlib.use("Agg") # No display is needed: we only write PNG files
import matplotlib.pyplot as plt

# Disable (less verbose) 3rd party logging
logging.getLogger("matplotlib").setLevel(logging.WARNING)
logging.getLogger("PIL.PngImagePlugin").setLevel(logging.WARNING)

logger = logging.getLogger("network_stats_plot")

def check_output_path(output_path):
    """Path which will be replaced by the chart and the directory which contains it

    Symbolic links are followed: the file they point to is overwritten and the
    link is kept.
    """
    target = utils.resolve_path(output_path)
    directory = utils.parent_directory(target)

    if not os.path.isdir(directory):
        raise OutputWriteError(output_path, f"directory does not exist: '{directory}'")
    if os.path.isdir(target):
        raise OutputWriteError(output_path, "it is a directory")
    if not os.access(directory, os.W_OK):
        raise OutputWriteError(output_path, f"permission denied: '{directory}'")

    return target, directory

def plot(dataset, series, chart_spec=chart.CHART, axes_config=chart.AXES):
    fig, ax1 = plt.subplots(figsize=chart.figsize(chart_spec), dpi=chart_spec.dpi)
    ax2 = ax1.twinx()
    axes = {chart.PRIMARY_AXIS: ax1, chart.SECONDARY_AXIS: ax2}
    lines = []

    for s in series:
        x, y = dataset.series(*s.columns, label=s.label)
        line, = axes[s.axis].plot(x, y, s.style, color=s.color, label=s.label)

        lines.append(line)

        logger.debug("Series '%s' (columns %d:%d, axis %s): %d points", s.label, *s.columns, s.axis, len(x))

    # Primary axis: tics only on the left side
    ax1.tick_params(axis='y', which="both", left=True, right=axes_config.y_mirror_tics)
    # Secondary axis: tics on the right side
    ax2.tick_params(axis='y', which="both", left=False, right=axes_config.y2_tics, labelright=axes_config.y2_tics)

    # Legend with the lines of both axes
    ax2.legend(lines, [l.get_label() for l in lines], loc="upper right")

    return fig

def save(fig, output_path, target, directory, dpi):
    # Write to a temporary file and move it, so a failure never leaves a partial image
    tmp_path = None

    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".network-stats-plot.", suffix=".png", dir=directory)

        os.close(fd)
        os.chmod(tmp_path, 0o644) # mkstemp creates the file only readable by the owner
        fig.savefig(tmp_path, format="png", dpi=dpi)
        os.replace(tmp_path, target)
    except OSError as e:
        raise OutputWriteError(output_path, e.strerror if e.strerror else str(e)) from e
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)

def render(input_path, output_path, strict=False, plot_complete=False):
    """Render the chart of the stats stored in input_path as a PNG in output_path

    The output file is overwritten if it already exists.
    """
    input_path = os.fspath(input_path)
    output_path = os.fspath(output_path)
    series = chart.get_series(plot_complete=plot_complete)
    required_fields = max(max(s.columns) for s in series)

    dataset = read_stats(input_path, strict=strict, required_fields=required_fields)

    log_last_sample(dataset)

    target, directory = check_output_path(output_path)

    fig = plot(dataset, series)

    try:
        save(fig, output_path, target, directory, chart.CHART.dpi)
    finally:
        plt.close(fig)

    logger.info("Chart stored: '%s' (%dx%d px)", output_path, chart.CHART.width, chart.CHART.height)
