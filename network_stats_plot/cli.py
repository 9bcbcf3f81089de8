
import sys
import logging
import argparse

import network_stats_plot.utils.utils as utils
from network_stats_plot.renderer import render
from network_stats_plot.errors import PlotError

# Logging
logger = logging.getLogger("network_stats_plot")

def main(args):
    input_path = args.input_path
    output_path = args.output_path

    try:
        render(input_path, output_path, strict=args.strict, plot_complete=args.plot_complete)
    except PlotError as e:
        logger.error("%s", str(e))

        return 1

    return 0

def initialization(argv=None):
    parser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter,
                                     description="Plot network size and number of sections from the stats file of a network simulation")

    parser.add_argument('input_path', help="Stats file: whitespace-separated columns (index, network size, number of sections[, complete sections]). "
                                           "Files ending in .gz or .xz are decompressed")
    parser.add_argument('output_path', help="Output PNG file (1920x1080). It will be overwritten if it exists")

    parser.add_argument('--strict', action="store_true", help="Fail on malformed rows instead of skipping them with a warning")
    parser.add_argument('--plot-complete', action="store_true", help="Plot the number of complete sections (4th column) as well")
    parser.add_argument('--log-file', help="Store logging messages in the provided file instead of displaying them")

    parser.add_argument('-v', '--verbose', action="store_true", help="Verbose logging mode")

    args = parser.parse_args(argv)

    return args

def cli(argv=None):
    args = initialization(argv)

    # Logging
    utils.set_up_logging_logger(logger, filename=args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)

    logger.debug("Arguments processed: {}".format(str(args))) # First logging message should be the processed arguments

    return main(args)

if __name__ == "__main__":
    sys.exit(cli())
