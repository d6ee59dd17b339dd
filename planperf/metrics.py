"""
Performance indexes of single plans.

A plan's execution time is the sum of its step durations. Since the robots
in a step are synchronized, a step takes as long as its slowest action.

>>> plan = "r2(3):b1\\nr1(3):b2-r3(5):b3-r2(3):b4"
>>> total_time(plan), step_count(plan), move_count(plan)
(8.0, 2, 4)

"""

from planperf import parser, tools


def step_duration(step):
    """Return the duration of the slowest action in *step*.

    Steps without any duration take no time.
    """
    return max(parser.extract_durations(step), default=0.0)


def total_time(plan):
    total = 0.0
    for step in parser.split_steps(plan):
        total += step_duration(step)
    return total


def step_count(plan):
    return len(parser.split_steps(plan))


def move_count(plan):
    # Every action carries exactly one colon.
    return plan.count(":")


class Metric:
    """A performance index that is computed for each plan.

    *function* is called with the plan text and must return a number.
    *min_wins* is True if smaller values are better. The aggregated
    reports contain minimum, maximum and representative plans for every
    metric.

    >>> import re
    >>> robots = Metric("robots", lambda p: len(set(re.findall(r"(\\w+)\\(", p))))
    >>> robots("r1(2):a-r2(3):b\\nr1(1):c")
    2

    """

    def __init__(self, name, function, min_wins=True):
        self.name = name
        self.function = function
        self.min_wins = min_wins

    def __call__(self, plan):
        return self.function(plan)

    def __repr__(self):
        return f"<Metric {self.name}>"


TIME = Metric("time", total_time)
STEPS = Metric("steps", step_count)
MOVES = Metric("moves", move_count)

DEFAULT_METRICS = [TIME, STEPS, MOVES]


def get_metrics(extra_metrics=None):
    """Return the default metrics followed by *extra_metrics*."""
    extra_metrics = tools.make_list(extra_metrics)
    metrics = DEFAULT_METRICS + [m for m in extra_metrics if m not in DEFAULT_METRICS]
    names = [metric.name for metric in metrics]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate metric names: {duplicates}")
    return metrics
