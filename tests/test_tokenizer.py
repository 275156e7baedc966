"""
Goal: The picker command splits like a shell would for the cases people actually type.
"""
import pytest

from quickswitch.errors import EmptyCommandError, TokenizeError
from quickswitch.services.tokenizer import tokenize


def test_default_dmenu_command():
    assert tokenize("dmenu -b -i -l 20") == ("dmenu", ["-b", "-i", "-l", "20"])


def test_double_quoted_argument():
    assert tokenize('foo "bar baz" qux') == ("foo", ["bar baz", "qux"])


def test_escaped_space():
    assert tokenize("a\\ b c") == ("a b", ["c"])


def test_other_quote_is_literal_inside_quotes():
    assert tokenize("a 'b\"c' d") == ("a", ['b"c', "d"])


def test_quotes_glue_onto_surrounding_text():
    assert tokenize("rofi -p='go to' x") == ("rofi", ["-p=go to", "x"])


def test_escaped_quote_is_literal():
    assert tokenize('echo \\"hi') == ("echo", ['"hi'])


def test_backslash_inside_quotes_is_literal():
    assert tokenize("p 'a\\b'") == ("p", ["a\\b"])


def test_double_space_keeps_empty_argument():
    assert tokenize("a  b") == ("a", ["", "b"])


def test_empty_quotes_give_empty_argument():
    assert tokenize("a '' b") == ("a", ["", "b"])


def test_outer_spaces_ignored():
    assert tokenize("  dmenu -i  ") == ("dmenu", ["-i"])


def test_unterminated_quote_keeps_partial_token():
    assert tokenize("fzf --prompt 'pick ") == ("fzf", ["--prompt", "pick "])


def test_trailing_backslash_kept():
    assert tokenize("a b\\") == ("a", ["b\\"])


@pytest.mark.parametrize("command", ["", "   ", "'' x"])
def test_empty_program_rejected(command):
    with pytest.raises(EmptyCommandError):
        tokenize(command)


def test_empty_command_is_a_tokenize_error():
    assert issubclass(EmptyCommandError, TokenizeError)
