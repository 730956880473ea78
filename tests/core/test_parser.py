# tests/core/test_parser.py
from hmcon_shell.core.parser import collapse_spaces, parse_command_line, split_arguments, strip_quotes


def test_parse_simple_command():
    """A command without arguments."""
    assert parse_command_line("export") == ("export", [])


def test_parse_command_with_arguments():
    result = parse_command_line("mod clamp 0 100")
    assert result == ("mod", ["clamp", "0", "100"])


def test_parse_quoted_arguments():
    """A double-quoted run is a single token without its quotes."""
    assert parse_command_line('format "a b" c') == ("format", ["a b", "c"])


def test_parse_repeated_spaces_collapse():
    assert parse_command_line("format   a    b") == ("format", ["a", "b"])


def test_parse_command_name_is_case_insensitive():
    cmd, args = parse_command_line("FoRmAt ASC")
    assert cmd == "format"
    # Arguments keep their case
    assert args == ["ASC"]


def test_parse_empty_and_whitespace_input():
    assert parse_command_line("") == ("", [])
    assert parse_command_line("    ") == ("", [])


def test_parse_command_without_remainder_has_no_arguments():
    assert parse_command_line("abort ") == ("abort", [])


def test_unmatched_quote_is_kept_literally():
    assert split_arguments('"abc') == ['"abc']
    assert split_arguments('a "b c') == ["a", '"b', "c"]


def test_empty_quotes_give_an_empty_argument():
    assert split_arguments('x "" y') == ["x", "", "y"]


def test_spaces_inside_quotes_are_collapsed_first():
    assert parse_command_line('define title "big   hill"') == ("define", ["title", "big hill"])


def test_collapse_spaces_and_strip_quotes():
    assert collapse_spaces("a  b   c") == "a b c"
    assert strip_quotes('"C:/maps/my file.asc"') == "C:/maps/my file.asc"
