import pytest

from planperf import tools


@pytest.mark.parametrize(
    "value, result",
    [(None, []), ([1, 2], [1, 2]), ((1, 2), [1, 2]), ("time", ["time"])],
)
def test_make_list(value, result):
    assert tools.make_list(value) == result


def test_append_file(tmp_path):
    path = tmp_path / "log_indexes.txt"
    tools.append_file(path, "first\n")
    tools.append_file(path, "second\n")
    assert tools.read_file(path) == "first\nsecond\n"


@pytest.mark.parametrize("filename", ["properties", "properties.xz"])
def test_properties(tmp_path, filename):
    props = tools.Properties(filename=tmp_path / filename)
    props.update({"min_time": 2.0, "min_time_plan": "r1(2):a", "num_plans": 2})
    props.write()
    assert tools.Properties(filename=tmp_path / filename) == props


def test_properties_without_loading(tmp_path):
    path = tmp_path / "properties"
    path.write_text('{"min_time": 2.0}')
    assert tools.Properties(filename=path) == {"min_time": 2.0}
    props = tools.Properties(filename=path, load=False)
    assert props == {}
    assert props.path == path.resolve()


def test_read_file_keeps_carriage_returns(tmp_path):
    path = tmp_path / "log.txt"
    path.write_bytes(b"r1(1):a\r\nr2(2):b\r")
    assert tools.read_file(path) == "r1(1):a\r\nr2(2):b\r"
