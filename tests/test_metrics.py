import pytest

from planperf import metrics


@pytest.mark.parametrize(
    "step, duration",
    [
        ("r1(2):a-r2(9):b", 9.0),
        ("r4(5.2):g-r6(5.2):i", 5.2),
        ("r1:a", 0.0),
        ("", 0.0),
    ],
)
def test_step_duration(step, duration):
    assert metrics.step_duration(step) == duration


def test_total_time_single_plan():
    assert metrics.total_time("r1(3):b1\nr2(5):b2-r3(4):b3") == 8.0


def test_total_time_uses_max_not_sum():
    assert metrics.total_time("r1(2):a-r2(9):b\nr3(4):c") == 13.0


def test_total_time_integer_durations():
    time = metrics.total_time("r1(10):a")
    assert isinstance(time, float)
    assert float(str(time)) == 10


def test_total_time_step_without_duration():
    plan = "r1(2):a\nr2:b\nr3(1.5):c"
    assert metrics.total_time(plan) == 3.5
    assert metrics.step_count(plan) == 3


def test_empty_plan():
    assert metrics.total_time("") == 0.0
    assert metrics.step_count("") == 1
    assert metrics.move_count("") == 0


def test_total_time_ignores_ids_and_labels():
    plan = "r1(2):a-r2(9):b\nr3(4):c"
    renamed = "robotA(2):goal1-robotB(9):goal2\nx(4):y"
    assert metrics.total_time(plan) == metrics.total_time(renamed)


@pytest.mark.parametrize(
    "plan",
    [
        "r1(1):a",
        "r1(1):a-r2(1):b",
        "r1(1):a\nr2(1):b\nr3(1):c",
        "r6(3.5):h-r7(6):w3-r3(5.2):w2-r2(3.5):d-r5(5.2):i\nr7(6):l",
    ],
)
def test_counts(plan):
    assert metrics.step_count(plan) == 1 + plan.count("\n")
    assert metrics.move_count(plan) == plan.count(":")
    assert metrics.move_count(plan) >= metrics.step_count(plan)
    longest_step = max(metrics.step_duration(s) for s in plan.split("\n"))
    assert metrics.total_time(plan) >= longest_step


def test_metric_call():
    robots = metrics.Metric("robots", lambda plan: plan.count("-") + 1)
    assert robots("r1(1):a-r2(1):b") == 2
    assert robots.min_wins


def test_get_metrics():
    robots = metrics.Metric("robots", len)
    assert metrics.get_metrics() == metrics.DEFAULT_METRICS
    assert metrics.get_metrics(robots) == metrics.DEFAULT_METRICS + [robots]
    assert metrics.get_metrics([metrics.TIME]) == metrics.DEFAULT_METRICS


def test_get_metrics_duplicate_names():
    with pytest.raises(ValueError):
        metrics.get_metrics([metrics.Metric("time", len)])
