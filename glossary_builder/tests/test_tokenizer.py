"""
Tests for the word/separator tokenizer.
"""
import pytest

from glossary_builder.core.exceptions import InvalidArgumentError
from glossary_builder.core.models import WORD_SEPARATORS
from glossary_builder.core.tokenizer import is_separator_token, next_token, tokenize


class TestNextToken:

    def test_word_run(self):
        assert next_token("hello world", 0) == "hello"

    def test_separator_run(self):
        assert next_token("a, ;b", 1) == ", ;"

    def test_starts_mid_word(self):
        assert next_token("category", 3) == "egory"

    def test_runs_to_end_of_text(self):
        assert next_token("end.", 3) == "."
        assert next_token("tail", 0) == "tail"

    def test_tab_is_separator(self):
        assert next_token("x\t\ty", 1) == "\t\t"

    def test_other_punctuation_is_word(self):
        assert next_token("(a-b)! c", 0) == "(a-b)!"

    def test_custom_separators(self):
        assert next_token("a-b", 0, frozenset("-")) == "a"
        assert next_token("a-b", 1, frozenset("-")) == "-"

    @pytest.mark.parametrize("position", [-1, 4, 10])
    def test_out_of_range_position(self, position):
        with pytest.raises(InvalidArgumentError) as exc_info:
            next_token("abcd", position)
        assert exc_info.value.argument == "position"

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            next_token("", 0)


class TestTokenize:

    def test_tokens_alternate_classes(self):
        tokens = list(tokenize(" second term, mentions alpha."))
        assert tokens == [" ", "second", " ", "term", ", ", "mentions", " ", "alpha", "."]

    @pytest.mark.parametrize("text", [
        "",
        " first term",
        "a;b;c",
        "..leading and trailing..",
        "tabs\tand  spaces",
        '<a href="x.html">x</a>',
    ])
    def test_concatenation_reproduces_text(self, text):
        assert "".join(tokenize(text)) == text

    def test_tokens_are_never_mixed(self):
        for token in tokenize("one, two;three. four\tfive"):
            classes = {ch in WORD_SEPARATORS for ch in token}
            assert len(classes) == 1

    def test_is_separator_token(self):
        assert is_separator_token(", ")
        assert not is_separator_token("word")
        assert not is_separator_token("")
