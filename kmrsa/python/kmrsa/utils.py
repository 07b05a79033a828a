import argparse
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Union

import numpy as np

Pathlike = Union[str, Path]

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class AttributeDict(dict):
    def __getattr__(self, key):
        if key in self:
            return self[key]
        raise AttributeError(f"No such attribute '{key}'")

    def __setattr__(self, key, value):
        self[key] = value

    def __delattr__(self, key):
        if key in self:
            del self[key]
            return
        raise AttributeError(f"No such attribute '{key}'")


def setup_logger(
    log_filename: Pathlike,
    log_level: str = "info",
    use_console: bool = True,
) -> str:
    """Setup log level.

    Args:
      log_filename:
        The filename prefix to save the log. A timestamp is appended to it.
      log_level:
        The log level to use, e.g., "debug", "info", "warning", "error",
        "critical". Unknown levels fall back to "error".
      use_console:
        True to also print logs to console.
    Returns:
      Return the name of the log file.
    """
    date_time = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    formatter = "%(asctime)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s"
    log_filename = f"{log_filename}-{date_time}"

    log_dir = os.path.dirname(log_filename)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    level = _LOG_LEVELS.get(log_level, logging.ERROR)

    logging.basicConfig(
        filename=log_filename,
        format=formatter,
        level=level,
        filemode="w",
    )
    if use_console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(formatter))
        logging.getLogger("").addHandler(console)
    return log_filename


def str2bool(v):
    """Used in argparse.ArgumentParser.add_argument to indicate
    that a type is a bool type and user can enter

        - yes, true, t, y, 1, to represent True
        - no, false, f, n, 0, to represent False

    See https://stackoverflow.com/questions/15008758/parsing-boolean-values-with-argparse  # noqa
    """
    if isinstance(v, bool):
        return v
    if v.lower() in ("yes", "true", "t", "y", "1"):
        return True
    elif v.lower() in ("no", "false", "f", "n", "0"):
        return False
    else:
        raise argparse.ArgumentTypeError("Boolean value expected.")


def format_suffixes(text, suffix_array: np.ndarray):
    """Return the suffixes of ``text`` in the order given by
    ``suffix_array``, one per line, each prefixed with its start position.

    ``text`` can be a ``str``, ``bytes`` or a 1-D np.ndarray; array
    suffixes are printed as lists of codes.
    """
    lines = []
    for i in suffix_array.tolist():
        suffix = text[i:]
        if isinstance(suffix, np.ndarray):
            suffix = suffix.tolist()
        if not isinstance(suffix, str):
            suffix = repr(suffix)
        lines.append(f"{i}\t{suffix}")
    return "\n".join(lines)
