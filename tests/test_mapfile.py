import pytest

from turtix.mapfile import MapEntry, load_map, parse_line, parse_map


def test_parse_line_basic():
    assert parse_line("1,2,block", ",") == ["1", "2", "block"]


def test_parse_line_trailing_separator_and_empty_fields():
    assert parse_line("a,b,", ",") == ["a", "b"]
    assert parse_line("a,,b", ",") == ["a", "", "b"]
    assert parse_line("", ",") == []


def test_parse_line_round_trip():
    fields = ["blocks", "12", "34", "ground"]
    assert parse_line(",".join(fields), ",") == fields


SAMPLE = [
    "blocks\n",
    "10,20,ground\n",
    "30,40,wall\n",
    "turtles\n",
    "5,6\n",
    "weak_enemies\n",
    "7,8,3\n",
    "stars\n",
    "1,2,shining\n",
]


def test_parse_map_sections():
    entries = parse_map(SAMPLE)
    assert entries[0] == MapEntry("blocks", 10, 20, "ground")
    assert entries[1] == MapEntry("blocks", 30, 40, "wall")
    assert entries[2] == MapEntry("turtles", 5, 6, None)
    assert entries[3].kind == "weak_enemies"
    assert entries[3].speed_bonus == 3
    assert [e.kind for e in entries] == ["blocks", "blocks", "turtles", "weak_enemies", "stars"]


def test_lines_before_any_section_are_ignored():
    assert parse_map(["1,2,x", "gems", "3,4"]) == [MapEntry("gems", 3, 4, None)]


def test_blank_lines_and_crlf():
    entries = parse_map(["gates\r\n", "\n", "9,10,gate\r\n"])
    assert entries == [MapEntry("gates", 9, 10, "gate")]


def test_leading_integer_parsing():
    entries = parse_map(["thorns", " 12abc,-5,spike"])
    assert (entries[0].x, entries[0].y) == (12, -5)


def test_non_numeric_coordinate_raises():
    with pytest.raises(ValueError):
        parse_map(["blocks", "abc,1,ground"])


def test_missing_value_raises():
    with pytest.raises(ValueError):
        parse_map(["strong_enemies", "1,2"])


def test_load_map(tmp_path):
    path = tmp_path / "map1.csv"
    path.write_text("".join(SAMPLE), encoding="utf-8")
    assert load_map(path) == parse_map(SAMPLE)


def test_load_missing_map(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "absent.csv")