import argparse
import logging
import lzma
import shutil
import sys
from pathlib import Path


# Use simplejson where it's available, because it is compatible (just separately
# maintained), puts no blanks at line endings and loads json much faster.
try:
    import simplejson as json
except ImportError:
    import json


DEFAULT_ENCODING = "utf-8"


def configure_logging(level=logging.INFO):
    # Python adds a default handler if some log is written before this
    # function is called. We therefore remove all handlers that have
    # been added automatically.
    root_logger = logging.getLogger("")
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    class ErrorAbortHandler(logging.StreamHandler):
        """
        Logging handler that exits when a critical error is encountered.
        """

        def emit(self, record):
            logging.StreamHandler.emit(self, record)
            if record.levelno >= logging.CRITICAL:
                sys.exit("aborting")

    class StdoutFilter(logging.Filter):
        def filter(self, record):
            return record.levelno <= logging.WARNING

    class StderrFilter(logging.Filter):
        def filter(self, record):
            return record.levelno > logging.WARNING

    formatter = logging.Formatter("%(asctime)-s %(levelname)-8s %(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(StdoutFilter())

    stderr_handler = ErrorAbortHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.addFilter(StderrFilter())

    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(stderr_handler)
    root_logger.setLevel(level)


def make_list(value):
    if value is None:
        return []
    elif isinstance(value, list):
        return value[:]
    elif isinstance(value, (tuple, set)):
        return list(value)
    else:
        return [value]


def read_file(filename):
    # Keep carriage returns, only "\n" separates steps and plans.
    with open(filename, encoding=DEFAULT_ENCODING, newline="") as f:
        return f.read()


def write_file(filename, content):
    with open(filename, "w", encoding=DEFAULT_ENCODING) as f:
        f.write(content)


def append_file(filename, content):
    """Append *content* to *filename*. Never truncate existing results."""
    with open(filename, "a", encoding=DEFAULT_ENCODING, newline="") as f:
        f.write(content)


class Properties(dict):
    """Transparently handle properties files compressed with xz."""

    class _PropertiesEncoder(json.JSONEncoder):
        def default(self, o):
            if isinstance(o, Path):
                return str(o)
            else:
                return super().default(o)

    JSON_ARGS = {
        "cls": _PropertiesEncoder,
        "indent": 2,
        "separators": (",", ": "),
        "sort_keys": True,
    }

    def __init__(self, filename=None, load=True):
        dict.__init__(self)
        self.path = Path(filename).resolve() if filename else None
        if self.path and self.path.suffix != ".xz":
            xz_path = self.path.with_suffix(".xz")
            if self.path.is_file() and xz_path.is_file():
                logging.critical(f"Only one of {self.path} and {xz_path} may exist")
            if not self.path.is_file() and xz_path.is_file():
                self.path = xz_path
        if load and self.path and self.path.is_file():
            self.load(self.path)

    def load(self, filename):
        path = Path(filename)
        open_func = lzma.open if path.suffix == ".xz" else open
        with open_func(path, "rt") as f:
            try:
                self.update(json.load(f))
            except ValueError as e:
                logging.critical(f"JSON parse error in file '{path}': {e}")

    def write(self):
        """Write the properties to disk."""
        assert self.path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        open_func = lzma.open if self.path.suffix == ".xz" else open
        with open_func(self.path, "wt") as f:
            json.dump(self, f, **self.JSON_ARGS)


class RawAndDefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help message formatter which preserves the description format and adds
    default values to argument help messages.
    """

    def __init__(self, prog, **kwargs):
        # Use the whole terminal width.
        width = shutil.get_terminal_size().columns
        argparse.HelpFormatter.__init__(self, prog, width=width, **kwargs)

    def _fill_text(self, text, width, indent):
        return "\n".join(indent + line for line in text.splitlines())

    def _get_help_string(self, action):
        help = action.help
        if "%(default)" not in action.help and "default" not in action.help:
            if action.default is not argparse.SUPPRESS:
                defaulting_nargs = [argparse.OPTIONAL, argparse.ZERO_OR_MORE]
                if action.option_strings or action.nargs in defaulting_nargs:
                    help += " (default: %(default)s)"
        return help


def get_argument_parser(**kwargs):
    return argparse.ArgumentParser(formatter_class=RawAndDefaultsHelpFormatter, **kwargs)
