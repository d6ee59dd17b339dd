#! /usr/bin/env python

"""
Compute performance indexes for the solutions in a simulator log.

Given a log file, say ``log.txt``, the indexes are appended to
``log_indexes.txt`` in the same directory, so repeated evaluations
accumulate in one file::

    min time:      79.5
    max time:      780.0000000000002
    mean time:     298.377
    minSteps:      9
    maxSteps:      111
    ...
    ----------------------------------------

"""

import logging
from pathlib import Path

from planperf import reports, tools
from planperf.reports import scatter


def get_output_filename(filename):
    """Return the path of the indexes file for the log *filename*.

    >>> str(get_output_filename("log.txt"))
    'log_indexes.txt'
    >>> str(get_output_filename("runs.v2/log"))
    'runs.v2/log_indexes'
    >>> str(get_output_filename(".log"))
    '_indexes.log'
    """
    path = Path(filename)
    base, dot, extension = path.name.rpartition(".")
    if not dot:
        return path.with_name(f"{path.name}_indexes")
    return path.with_name(f"{base}_indexes.{extension}")


def read_log(filename):
    """Return the content of *filename* or None if it cannot be read."""
    try:
        return tools.read_file(filename)
    except (OSError, UnicodeDecodeError) as err:
        logging.error(f"Problems with file {filename}: {err}")
        return None


def append_indexes(indexes, filename, layout="legacy"):
    """Append the indexes record for the log *filename* to its indexes file.

    Return the record or None if the indexes file cannot be written.
    """
    record = reports.format_indexes(indexes, layout=layout)
    outfile = get_output_filename(filename)
    try:
        tools.append_file(outfile, record)
    except OSError as err:
        logging.error(f"Problems with file {outfile}: {err}")
        return None
    logging.info(f"Appended indexes to file://{outfile}")
    return record


def post_process(filename, layout="legacy", metrics=None):
    """
    Append the indexes of all plans in the log *filename* to the indexes
    file next to it and return the indexes.

    Unreadable or empty logs and unwritable indexes files are logged and
    produce no record. In these cases None is returned.
    """
    content = read_log(filename)
    if content is None:
        return None
    indexes = reports.compute_indexes(content, metrics=metrics)
    if indexes is None:
        return None
    if append_indexes(indexes, filename, layout=layout) is None:
        return None
    return indexes


def parse_args(args=None):
    parser = tools.get_argument_parser(description=__doc__)
    parser.add_argument("log_file", help="log file with one plan per paragraph")
    parser.add_argument(
        "--layout",
        choices=reports.LAYOUTS,
        default="legacy",
        help='"legacy" lists the fastest plan under "minSteps:", '
        '"corrected" lists the plan with the fewest steps there',
    )
    parser.add_argument(
        "--properties", metavar="FILE", help="also dump all indexes as JSON to FILE"
    )
    parser.add_argument(
        "--table", metavar="FILE", help="also write a table of all indexes to FILE"
    )
    parser.add_argument(
        "--table-format",
        default="html",
        help="txt2tags target for --table, e.g., html, tex or txt",
    )
    parser.add_argument(
        "--scatter", metavar="FILE", help="also plot time over steps to FILE"
    )
    parser.add_argument("--debug", action="store_true", help="show debug output")
    return parser.parse_args(args)


def main(args=None):
    args = parse_args(args)
    tools.configure_logging(logging.DEBUG if args.debug else logging.INFO)

    report = None
    if args.table:
        try:
            report = reports.IndexReport(format=args.table_format)
        except ValueError as err:
            logging.critical(err)

    indexes = post_process(args.log_file, layout=args.layout)
    if indexes is None:
        return

    if args.properties:
        # Start afresh, keys of older dumps must not survive.
        props = tools.Properties(filename=args.properties, load=False)
        props.update(indexes.get_properties())
        props.write()
        logging.info(f"Wrote file://{props.path}")
    if report:
        report.write(indexes, args.table, title=Path(args.log_file).name)
    if args.scatter:
        scatter.write_scatter_plot(indexes, args.scatter)


if __name__ == "__main__":
    main()
