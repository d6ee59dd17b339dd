"""
Aggregate the performance indexes of all plans in a log and format them.
"""

import collections
import logging
import math

import txt2tags

from planperf import metrics as metrics_module
from planperf import parser, tools
from planperf.reports import markup
from planperf.reports.markup import Document


LAYOUTS = ["legacy", "corrected"]
RULE = "-" * 40


def arithmetic_mean(values):
    """Compute the arithmetic mean of a sequence of numbers.

    >>> arithmetic_mean([20, 30, 70])
    40.0
    """
    assert None not in values
    return math.fsum(values) / len(values)


class PlanIndexes:
    """
    Running minima, maxima and means over a stream of plans.

    For each metric the first plan attaining the minimum (maximum) is kept
    as representative plan. Later plans only replace it if they are
    strictly better (worse).

    >>> indexes = PlanIndexes()
    >>> for plan in ["r1(2):a", "r1(3):a-r2(7):b"]:
    ...     indexes.add_plan(plan)
    >>> indexes.get_min("time"), indexes.get_max("time"), indexes.get_mean("time")
    (2.0, 7.0, 4.5)
    >>> indexes.get_max_plan("moves")
    'r1(3):a-r2(7):b'

    """

    def __init__(self, metrics=None):
        self.metrics = metrics_module.get_metrics(metrics)
        self.num_plans = 0
        # Per-plan values in log order for each metric.
        self.values = collections.defaultdict(list)
        self._minima = {}
        self._maxima = {}
        self._min_plans = {}
        self._max_plans = {}

    def add_plan(self, plan):
        for metric in self.metrics:
            name = metric.name
            value = metric(plan)
            self.values[name].append(value)
            if not self.num_plans or value < self._minima[name]:
                self._minima[name] = value
                self._min_plans[name] = plan
            if not self.num_plans or value > self._maxima[name]:
                self._maxima[name] = value
                self._max_plans[name] = plan
        self.num_plans += 1

    def _check(self, name):
        if not self.num_plans:
            raise ValueError("No plans have been added")
        if name not in self.values:
            raise ValueError(f"Unknown metric: {name}")

    def get_min(self, name):
        self._check(name)
        return self._minima[name]

    def get_max(self, name):
        self._check(name)
        return self._maxima[name]

    def get_min_plan(self, name):
        self._check(name)
        return self._min_plans[name]

    def get_max_plan(self, name):
        self._check(name)
        return self._max_plans[name]

    def get_mean(self, name):
        self._check(name)
        mean = arithmetic_mean(self.values[name])
        # Rounding errors must not move the mean out of [min, max].
        return min(max(mean, self._minima[name]), self._maxima[name])

    @property
    def mean_time(self):
        return self.get_mean(metrics_module.TIME.name)

    def get_properties(self):
        """Return a flat dictionary of all indexes.

        For every metric ``<name>`` it contains ``min_<name>``,
        ``max_<name>``, ``mean_<name>``, ``min_<name>_plan`` and
        ``max_<name>_plan``.
        """
        props = {"num_plans": self.num_plans}
        for metric in self.metrics:
            name = metric.name
            props[f"min_{name}"] = self.get_min(name)
            props[f"max_{name}"] = self.get_max(name)
            props[f"mean_{name}"] = self.get_mean(name)
            props[f"min_{name}_plan"] = self.get_min_plan(name)
            props[f"max_{name}_plan"] = self.get_max_plan(name)
        return props


def compute_indexes(content, metrics=None):
    """Compute the indexes of all plans in the log *content*.

    Return None and log an error if the log contains no plans.
    """
    indexes = PlanIndexes(metrics)
    for plan in parser.iter_plans(content):
        indexes.add_plan(plan)
    if not indexes.num_plans:
        logging.error("The log contains no plans")
        return None
    logging.info(f"Parsed {indexes.num_plans} plans")
    return indexes


def format_indexes(indexes, layout="legacy"):
    """Return the indexes as a plain-text record ending with a rule line.

    The "legacy" layout lists the plan with minimal execution time under
    both "minPlan:" and "minSteps:". The "corrected" layout lists the plan
    with the fewest steps under "minSteps:".

    >>> indexes = compute_indexes("r1(2):a\\n\\nr1(3):a-r2(7):b")
    >>> print(format_indexes(indexes).splitlines()[2])
    mean time:     4.5
    """
    if layout not in LAYOUTS:
        raise ValueError(f"invalid layout: {layout}")
    min_time_plan = indexes.get_min_plan("time")
    if layout == "legacy":
        min_steps_plan = min_time_plan
    else:
        min_steps_plan = indexes.get_min_plan("steps")
    lines = [
        f"min time:      {indexes.get_min('time')}",
        f"max time:      {indexes.get_max('time')}",
        f"mean time:     {indexes.mean_time}",
        f"minSteps:      {indexes.get_min('steps')}",
        f"maxSteps:      {indexes.get_max('steps')}",
        f"minRobotMoves: {indexes.get_min('moves')}",
        f"maxRobotMoves: {indexes.get_max('moves')}",
        "minPlan:  ",
        min_time_plan,
        "minSteps: ",
        min_steps_plan,
        "minRobotMovesP: ",
        indexes.get_min_plan("moves"),
        RULE,
    ]
    return "\n".join(lines) + "\n"


class Table(collections.OrderedDict):
    def __init__(self, title="", digits=2):
        """
        Ordered mapping from row names to column names to cell values
        that renders as txt2tags markup with ``str()``. Rows and columns
        are printed in insertion order.

        >>> t = Table(title="index")
        >>> t.add_cell("min time", "value", 2.0)
        >>> t.add_row("max time", {"value": 7.5, "plan": "r1(7.5):a"})
        >>> print(str(t).replace('""', ""))
        || index |  value |  plan |
         | min time  |  2.00 |   |
         | max time  |  7.50 | r1(7.5):a  |
        >>> t.col_names
        ['value', 'plan']
        """
        collections.OrderedDict.__init__(self)
        self.title = title
        self.digits = digits

    def add_cell(self, row, col, value):
        """Set Table[row][col] = value."""
        self.setdefault(row, collections.OrderedDict())[col] = value

    def add_row(self, row_name, row):
        """Add a new data row called *row_name* to the table.

        *row* must be a mapping from column names to values.
        """
        self[row_name] = collections.OrderedDict(row)

    @property
    def row_names(self):
        return list(self.keys())

    @property
    def col_names(self):
        col_names = []
        for row in self.values():
            col_names.extend(col for col in row if col not in col_names)
        return col_names

    def _format_value(self, value):
        if value is None:
            return ""
        if isinstance(value, float):
            return f"{value:.{self.digits}f}"
        if isinstance(value, int):
            return str(value)
        # Plans span multiple lines.
        result = str(value).replace("\n", "\\\\")
        return markup.escape(result)

    def _format_cell(self, value):
        if isinstance(value, (float, int)):
            return " " + self._format_value(value)
        return self._format_value(value) + " "

    def _get_row_markup(self, cells, template=" | {} |"):
        return template.format(" | ".join(cells))

    def __str__(self):
        """Return the txt2tags markup for this table."""
        header = [self.title] + [" " + col for col in self.col_names]
        parts = [self._get_row_markup(header, template="|| {} |")]
        for row_name, row in self.items():
            cells = [str(row_name) + " "]
            cells += [self._format_cell(row.get(col)) for col in self.col_names]
            parts.append(self._get_row_markup(cells))
        return "\n".join(parts)


class IndexReport:
    """
    Write the indexes of a log as a table in any txt2tags target format
    (e.g., txt, html, tex).

    >>> report = IndexReport(format="html")
    >>> report = IndexReport(format="docx")
    Traceback (most recent call last):
      ...
    ValueError: invalid format: docx

    """

    def __init__(self, format="html", digits=2):
        if format not in txt2tags.TARGETS:
            raise ValueError(f"invalid format: {format}")
        self.output_format = format
        self.digits = digits

    def get_table(self, indexes):
        table = Table(title="index", digits=self.digits)
        table.add_cell("plans", "value", indexes.num_plans)
        for metric in indexes.metrics:
            name = metric.name
            table.add_row(
                f"min {name}",
                {"value": indexes.get_min(name), "plan": indexes.get_min_plan(name)},
            )
            table.add_row(
                f"max {name}",
                {"value": indexes.get_max(name), "plan": indexes.get_max_plan(name)},
            )
            table.add_cell(f"mean {name}", "value", indexes.get_mean(name))
        return table

    def get_markup(self, indexes):
        """Return txt2tags markup for the indexes."""
        return str(self.get_table(indexes))

    def get_text(self, indexes, title=""):
        """Convert the markup to the desired output format."""
        doc = Document(title=title)
        doc.add_text(self.get_markup(indexes))
        return doc.render(self.output_format)

    def write(self, indexes, outfile, title=""):
        content = self.get_text(indexes, title=title)
        tools.write_file(outfile, content)
        logging.info(f"Wrote file://{outfile}")
