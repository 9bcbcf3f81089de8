
import os
import lzma
import logging

import network_stats_plot.utils.utils as utils
from network_stats_plot.errors import (
    InputNotFound,
    MalformedRow,
)

logger = logging.getLogger("network_stats_plot")

# Columns written by the simulator for each sample (1-indexed)
COLUMN_INDEX = 1
COLUMN_NETWORK_SIZE = 2
COLUMN_SECTIONS = 3
COLUMN_COMPLETE = 4

class StatsDataset:
    """Numeric rows read from a whitespace-delimited stats file.

    Rows are kept with the number of fields they were provided with, so a
    series only takes the rows which have the column it needs.
    """

    def __init__(self, path, rows, line_numbers):
        assert len(rows) == len(line_numbers), f"len(rows) != len(line_numbers): {len(rows)} vs {len(line_numbers)}"

        self.path = path
        self.rows = rows
        self.line_numbers = line_numbers

    def __len__(self):
        return len(self.rows)

    def series(self, x_column, y_column, label=None):
        """Values of the provided columns (1-indexed) for the rows which have both"""
        x, y = [], []
        skipped = 0
        needed = max(x_column, y_column)

        for row, line_number in zip(self.rows, self.line_numbers):
            if len(row) < needed:
                logger.warning("Row skipped for series '%s' (line #%d): %d fields provided but column %d is needed",
                               label if label else f"{x_column}:{y_column}", line_number, len(row), needed)

                skipped += 1

                continue

            x.append(row[x_column - 1])
            y.append(row[y_column - 1])

        if skipped:
            logger.debug("Rows skipped for series '%s': %d of %d", label, skipped, len(self.rows))

        return x, y

    def last_sample(self):
        if len(self.rows) == 0:
            return None

        return self.rows[-1]

def parse_line(line):
    fields = line.split()

    return [float(field) for field in fields]

def read_stats(input_path, strict=False, required_fields=COLUMN_SECTIONS):
    """Load a stats file

    Empty lines and lines starting with '#' are ignored. Rows which cannot be
    used by any series (non-numeric fields, less than 2 fields) are skipped
    with a warning. Bytes which are not valid text are escaped, so they end up
    as non-numeric fields of their row. When strict=True, MalformedRow is
    raised instead for those rows and for rows with less than
    `required_fields` fields.
    """
    input_path = os.fspath(input_path)

    if not os.path.exists(input_path):
        raise InputNotFound(input_path)
    if os.path.isdir(input_path):
        raise InputNotFound(input_path, reason="is a directory")
    if not os.access(input_path, os.R_OK):
        raise InputNotFound(input_path, reason="is not readable")

    rows, line_numbers = [], []

    try:
        with utils.open_xz_or_gzip_or_plain(input_path, mode='rt', errors="backslashreplace") as fd:
            for idx, line in enumerate(fd, 1):
                line = line.strip()

                if line == '' or line.startswith('#'):
                    continue

                try:
                    row = parse_line(line)
                except ValueError:
                    if strict:
                        raise MalformedRow(idx, line, "non-numeric field")

                    logger.warning("Row skipped (line #%d): non-numeric field: '%s'", idx, line)

                    continue

                if len(row) < 2:
                    if strict:
                        raise MalformedRow(idx, line, f"2 fields needed but {len(row)} provided")

                    logger.warning("Row skipped (line #%d): 2 fields needed but %d provided", idx, len(row))

                    continue

                if strict and len(row) < required_fields:
                    raise MalformedRow(idx, line, f"{required_fields} fields needed but {len(row)} provided")

                rows.append(row)
                line_numbers.append(idx)
    except (EOFError, lzma.LZMAError) as e:
        raise InputNotFound(input_path, reason=f"could not be read ({e})") from e
    except OSError as e:
        # Permission errors and corrupted compressed files
        raise InputNotFound(input_path, reason=f"could not be read ({e.strerror if e.strerror else e})") from e

    logger.info("Rows loaded from '%s': %d", input_path, len(rows))

    return StatsDataset(input_path, rows, line_numbers)

def log_last_sample(dataset):
    last = dataset.last_sample()

    if last is None:
        logger.warning("No samples available in '%s'", dataset.path)

        return

    values = [("Size", COLUMN_NETWORK_SIZE), ("Sections", COLUMN_SECTIONS), ("Complete", COLUMN_COMPLETE)]
    summary = ' '.join(f"{name}: {last[column - 1]:g}" for name, column in values if len(last) >= column)

    logger.info("Last sample (index %g): %s", last[COLUMN_INDEX - 1], summary)
