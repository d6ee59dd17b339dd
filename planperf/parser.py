"""
Split the logs written by the multi-robot simulator into plans, steps and
durations.

A log holds one plan per paragraph. Each line of a plan is a step in which
several robots act synchronously, each action being written as
``<robot>(<duration>):<label>`` and actions being separated by dashes::

    r4(5.2):g-r6(5.2):i
    r7(3.5):d-r6(5.2):w3

    r6(3.5):h-r7(6):w3-r3(5.2):w2
    r7(6):l

Only the durations are interpreted. Robot ids and labels are opaque.

"""

import logging
import re


PLAN_SEPARATOR = "\n\n"
STEP_SEPARATOR = "\n"
ACTION_SEPARATOR = "-"

# Durations are of the form "34" or "23.678" with ASCII digits only.
DURATION_REGEX = re.compile(r"\((\d+(\.\d+)?)\)", re.ASCII)


def extract_durations(step):
    """Return the parenthesized durations in *step* in order of appearance.

    >>> extract_durations("r1(3.5):b1-r3(5):b3")
    [3.5, 5.0]
    >>> extract_durations("r1(x):b1-r2():b2")
    []
    """
    return [float(match.group(1)) for match in DURATION_REGEX.finditer(step)]


def split_log(content):
    """Split the log *content* into plans at blank lines.

    Nothing is trimmed, so empty segments (e.g., caused by a trailing
    blank line) are returned as well.

    >>> split_log("r1(2):a\\n\\nr1(3):a-r2(7):b")
    ['r1(2):a', 'r1(3):a-r2(7):b']
    """
    return content.split(PLAN_SEPARATOR)


def iter_plans(content):
    """Yield the non-empty plans of the log *content* in order."""
    for index, plan in enumerate(split_log(content)):
        if not plan:
            logging.debug(f"Skipping empty plan at position {index}")
            continue
        yield plan


def split_steps(plan):
    """
    >>> split_steps("r1(3):b1\\nr2(5):b2-r3(4):b3")
    ['r1(3):b1', 'r2(5):b2-r3(4):b3']
    """
    return plan.split(STEP_SEPARATOR)
