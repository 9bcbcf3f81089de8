import os
import gzip
import lzma
import logging
from contextlib import contextmanager

def set_up_logging_logger(logger, filename=None, level=logging.INFO, format="[%(asctime)s] [%(name)s] [%(levelname)s] [%(module)s:%(lineno)d] %(message)s"):
    # Handlers of previous calls are replaced, not accumulated
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    if filename is not None:
        # Logging messages will be stored and not displayed
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(format))

    logger.addHandler(handler)
    logger.setLevel(level)

    return logger

@contextmanager
def open_xz_or_gzip_or_plain(file_path, mode='rt', errors=None):
    f = None
    try:
        if file_path[-3:] == ".gz":
            f = gzip.open(file_path, mode, errors=errors)
        elif file_path[-3:] == ".xz":
            f = lzma.open(file_path, mode, errors=errors)
        else:
            f = open(file_path, mode, errors=errors)
        yield f

    finally:
        if f:
            f.close()

def resolve_path(p):
    result = os.path.realpath(os.path.expanduser(p)) if isinstance(p, str) else p

    return result.rstrip('/') if result else result

def parent_directory(p):
    directory = os.path.dirname(resolve_path(p))

    return directory if directory else '.'
