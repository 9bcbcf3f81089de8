import logging

import pytest

@pytest.fixture(autouse=True)
def reset_package_logger():
    yield

    logger = logging.getLogger("network_stats_plot")

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(logging.NOTSET)

@pytest.fixture
def write_stats(tmp_path):
    def f(lines, name="stats.txt"):
        path = tmp_path / name

        path.write_text(''.join(f"{l}\n" for l in lines))

        return path

    return f
