import pytest

from raycube.textutil import (
    atoi,
    is_blank,
    is_space,
    read_lines,
    split_commas,
    split_words,
    trim,
)


def test_split_words_keeps_newline_in_last_word():
    assert split_words("NO ./path.xpm\n") == ["NO", "./path.xpm\n"]


def test_split_words_collapses_spaces_and_tabs():
    assert split_words("\t F  \t 1,2,3 ") == ["F", "1,2,3"]


def test_split_words_only_separators():
    assert split_words(" \t  ") == []


def test_split_commas_basic():
    assert split_commas("10,20,30") == ["10", "20", "30"]


def test_split_commas_trailing_comma_ignored():
    assert split_commas("1,2,") == ["1", "2"]


def test_split_commas_empty_text():
    assert split_commas("") == []


@pytest.mark.parametrize("text", [",1,2", "1,,2", "1,2,,", ","])
def test_split_commas_rejects_bad_commas(text):
    with pytest.raises(ValueError):
        split_commas(text)


def test_split_commas_rejoin_round_trip():
    text = "220,100,0\n"
    assert ",".join(split_commas(text)) == text


@pytest.mark.parametrize(
    "text,expected",
    [(" -42abc", -42), ("+7", 7), ("abc", 0), ("\t\n12", 12), ("255\n", 255), ("-", 0), ("", 0)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_round_trips_integers():
    for value in (0, 1, 99, -1234):
        assert atoi(str(value)) == value


def test_trim_both_ends():
    assert trim("  ./tex.xpm \n", " \n\v\t\r\f") == "./tex.xpm"


def test_trim_everything():
    assert trim("\n \n", " \n") == ""


def test_trim_keeps_inner_characters():
    assert trim(" a b ", " ") == "a b"


@pytest.mark.parametrize("char,expected", [(" ", True), ("\n", True), ("\t", False), ("1", False), ("", False)])
def test_is_space(char, expected):
    assert is_space(char) is expected


@pytest.mark.parametrize("text,expected", [("\t \r\n\v\f", True), ("", True), (" x ", False), ("1", False)])
def test_is_blank(text, expected):
    assert is_blank(text) is expected


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_bytes(b"NO a\nSO b\n")
    assert read_lines(path) == ["NO a\n", "SO b\n"]


def test_read_lines_last_line_without_newline(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_bytes(b"111\n101")
    assert read_lines(path) == ["111\n", "101"]


def test_read_lines_keeps_carriage_returns(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_bytes(b"x\r\ny")
    assert read_lines(path) == ["x\r\n", "y"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_bytes(b"")
    assert read_lines(path) == []


def test_read_lines_round_trip(tmp_path):
    content = "F 1,2,3\n\n\n  1111\n  1N01\n  1111\n"
    path = tmp_path / "scene.cub"
    path.write_text(content)
    lines = read_lines(path)
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines)


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.cub")