import pytest

from ryukit.json_data import JsonData


def test_get_text_is_compact():
    data = JsonData('{"a": 1, "b": "x"}')
    assert data.get_text() == '{"a":1,"b":"x"}'


def test_members_by_position():
    data = JsonData('{"name": "cam", "width": 640}')
    assert len(data) == 2
    assert data.name_at(0) == "name"
    assert data.name_at(1) == "width"
    assert data.get_string(0) == "cam"
    assert data.get_int(1) == 640


def test_out_of_range_positions_give_empty_results():
    data = JsonData('{"name": "cam"}')
    assert data.name_at(5) == ""
    assert data.get_string(5) == ""
    assert data.get_int(5) == 0
    assert data.name_at(-1) == ""


def test_members_by_name():
    data = JsonData('{"name": "cam", "width": 640}')
    assert data.get_string("name") == "cam"
    assert data.get_int("width") == 640


def test_missing_name_raises():
    data = JsonData("{}")
    with pytest.raises(KeyError):
        data.get_string("absent")


def test_wrong_type_raises():
    data = JsonData('{"name": "cam"}')
    with pytest.raises(TypeError):
        data.get_int("name")


def test_set_adds_new_members_at_end():
    data = JsonData('{"a": 1}')
    data.set_string("b", "text")
    data.set_int("c", 7)
    assert len(data) == 3
    assert data.name_at(2) == "c"
    assert data.get_string("b") == "text"
    assert data.get_int("c") == 7


def test_set_by_position_replaces_value():
    data = JsonData('{"a": 1, "b": "x"}')
    data.set_int(0, 42)
    data.set_string(1, "y")
    assert data.get_int("a") == 42
    assert data.get_string("b") == "y"


def test_set_by_position_out_of_range_raises():
    data = JsonData('{"a": 1}')
    with pytest.raises(IndexError):
        data.set_int(3, 1)


def test_parse_rejects_invalid_text():
    with pytest.raises(ValueError):
        JsonData("{not json")


def test_parse_rejects_non_object():
    with pytest.raises(ValueError):
        JsonData("[1, 2]")


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    original = JsonData('{"title": "한글", "count": 3}')
    original.save_to_file(path)
    loaded = JsonData()
    loaded.load_from_file(path)
    assert loaded.get_text() == original.get_text()
    assert loaded.get_string("title") == "한글"


def test_load_text_without_braces_gives_empty_object(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("nothing here", encoding="utf-8")
    data = JsonData('{"a": 1}')
    data.load_from_file(path)
    assert len(data) == 0
    assert data.get_text() == "{}"