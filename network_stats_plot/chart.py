
from collections import namedtuple

from network_stats_plot.dataset import (
    COLUMN_INDEX,
    COLUMN_NETWORK_SIZE,
    COLUMN_SECTIONS,
    COLUMN_COMPLETE,
)

PRIMARY_AXIS = "y"
SECONDARY_AXIS = "y2"

ChartSpec = namedtuple("ChartSpec", ["width", "height", "dpi"])
AxisConfig = namedtuple("AxisConfig", ["y_mirror_tics", "y2_tics"])
SeriesSpec = namedtuple("SeriesSpec", ["label", "columns", "color", "style", "axis"])

# 1920x1080 px (16x9 in at 120 dpi)
CHART = ChartSpec(width=1920, height=1080, dpi=120)
AXES = AxisConfig(y_mirror_tics=False, y2_tics=True)

NETWORK_SIZE = SeriesSpec(label="Network size", columns=(COLUMN_INDEX, COLUMN_NETWORK_SIZE),
                          color="red", style='-', axis=PRIMARY_AXIS)
SECTIONS = SeriesSpec(label="Number of sections", columns=(COLUMN_INDEX, COLUMN_SECTIONS),
                      color="blue", style='-', axis=SECONDARY_AXIS)
COMPLETE_SECTIONS = SeriesSpec(label="Complete sections", columns=(COLUMN_INDEX, COLUMN_COMPLETE),
                               color="green", style='-', axis=SECONDARY_AXIS)

def get_series(plot_complete=False):
    series = [NETWORK_SIZE, SECTIONS]

    if plot_complete:
        series.append(COMPLETE_SECTIONS)

    return series

def figsize(chart=CHART):
    return chart.width / chart.dpi, chart.height / chart.dpi
