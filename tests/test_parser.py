import pytest

from planperf import parser


@pytest.mark.parametrize(
    "step, durations",
    [
        ("r1(3.5):b1-r3(5.0):b3", [3.5, 5.0]),
        ("r4(5.2):g-r6(5.2):i", [5.2, 5.2]),
        ("r1(10):a", [10.0]),
        ("r1(0):a", [0.0]),
        ("r1(x):a-r2():b-r3(1.):c-r4(.5):d", []),
        ("r1(\u0663):a-r2(\u0661.5):b", []),
        ("r1(\uff12):a-r2(4):b", [4.0]),
        ("r1(2)x(3):a", [2.0, 3.0]),
        ("no durations here", []),
        ("", []),
    ],
)
def test_extract_durations(step, durations):
    assert parser.extract_durations(step) == durations


def test_extract_durations_ignores_text_outside_parentheses():
    assert parser.extract_durations("r12(4):w13-r7(6.25):l") == [4.0, 6.25]


def test_extract_durations_after_rejoining():
    durations = parser.extract_durations("ra(1.5):x-rb(3):y-rc(0.25):z")
    step = "-".join(f"x({d}):y" for d in durations)
    assert parser.extract_durations(step) == durations


def test_split_log():
    content = "r1(1):a\n\nr1(1):a-r2(1):b\n\nr1(1):a\nr2(1):b\nr3(1):c"
    assert parser.split_log(content) == [
        "r1(1):a",
        "r1(1):a-r2(1):b",
        "r1(1):a\nr2(1):b\nr3(1):c",
    ]


def test_split_log_keeps_whitespace():
    assert parser.split_log("r1(1):a \n\n r2(1):b") == ["r1(1):a ", " r2(1):b"]


def test_split_log_single_plan():
    assert parser.split_log("r1(3):b1\nr2(5):b2-r3(4):b3") == [
        "r1(3):b1\nr2(5):b2-r3(4):b3"
    ]


def test_iter_plans_skips_empty_segments():
    content = "r1(1):a\n\nr2(2):b\n\n"
    assert parser.split_log(content) == ["r1(1):a", "r2(2):b", ""]
    assert list(parser.iter_plans(content)) == ["r1(1):a", "r2(2):b"]


def test_iter_plans_empty_log():
    assert list(parser.iter_plans("")) == []


def test_split_steps():
    assert parser.split_steps("r1(2):a-r2(9):b\nr3(4):c") == [
        "r1(2):a-r2(9):b",
        "r3(4):c",
    ]
