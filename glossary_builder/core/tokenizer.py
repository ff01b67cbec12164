"""
Word/separator tokenizer used to find term occurrences in definitions.
"""
from typing import AbstractSet, Iterator

from .exceptions import InvalidArgumentError
from .models import WORD_SEPARATORS


def next_token(
    text: str,
    position: int,
    separators: AbstractSet[str] = WORD_SEPARATORS
) -> str:
    """
    Return the word or separator run that starts at ``position``.

    The run is the longest stretch of characters that are all separators or
    all non-separators, whichever class ``text[position]`` belongs to.

    Args:
        text: Text to scan
        position: Start index, 0 <= position < len(text)
        separators: Characters treated as token boundaries

    Returns:
        Non-empty token containing only separators or only word characters

    Raises:
        InvalidArgumentError: If position is out of range
    """
    if not 0 <= position < len(text):
        raise InvalidArgumentError(
            "Position out of range",
            argument="position",
            position=position,
            length=len(text)
        )

    in_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[position:end]


def tokenize(text: str, separators: AbstractSet[str] = WORD_SEPARATORS) -> Iterator[str]:
    """Yield every token of ``text`` in order; joined, they give back ``text``."""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def is_separator_token(token: str, separators: AbstractSet[str] = WORD_SEPARATORS) -> bool:
    return bool(token) and token[0] in separators
