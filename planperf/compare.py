"""
Select representative plans.

All selections prefer the earlier plan when two plans are equally good.
The folds start from the empty string, which stands for "no plan seen yet".
"""

import functools

from planperf import metrics


def select_best_time(current, candidate):
    """Return the plan that needs less execution time."""
    if metrics.total_time(candidate) < metrics.total_time(current):
        return candidate
    return current


def select_best_num_steps(current, candidate):
    """Return the plan with fewer steps.

    The empty sentinel counts as a plan with zero steps that is always
    replaced.
    """
    if not current or metrics.step_count(candidate) < metrics.step_count(current):
        return candidate
    return current


def select_best(current, candidate):
    """Fold step for the plan with the lowest execution time.

    >>> functools.reduce(select_best, ["r1(5):a", "r1(2):b", "r1(2):c"], "")
    'r1(2):b'
    """
    if not current:
        return candidate
    return select_best_time(current, candidate)


def best_plan(plans, key):
    """Return the earliest plan in *plans* that minimizes *key*.

    Return the empty string if there are no plans.

    >>> best_plan(["r1(1):a\\nr1(1):b", "r1(9):c"], metrics.step_count)
    'r1(9):c'
    """
    return min(plans, key=key, default="")


def best_plan_by_time(plans):
    return functools.reduce(select_best, plans, "")


def best_plan_by_steps(plans):
    return functools.reduce(select_best_num_steps, plans, "")
