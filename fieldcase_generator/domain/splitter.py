"""
Word splitting for struct field and enum variant identifiers.

An identifier is broken into alphabetic and digit runs at CamelCase
boundaries, letter/digit transitions and explicit separator characters.
"""

from typing import List

from .models import Identifier, Word, WordKind, is_digit


def _char_kind(char: str):
    if is_digit(char):
        return WordKind.DIGIT
    if char.isalpha():
        return WordKind.ALPHA
    return None


def split_identifier(text: str) -> Identifier:
    """
    Split an identifier into its words.

    Boundaries are inserted on a lowercase to uppercase transition, between
    letters and digits and at every separator character (anything that is
    neither a letter nor a digit), which is dropped. A run of capitals followed
    by a lowercase letter splits before its last capital, so an acronym stays
    apart from the word after it.

    Args:
        text: The raw identifier

    Returns:
        The identifier with its words in order

    Example:
        >>> [w.text for w in split_identifier("XMLHttp2_request")]
        ['XML', 'Http', '2', 'request']
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected string, got {type(text).__name__}")

    words: List[Word] = []
    current: List[str] = []
    current_kind = None

    def flush():
        if current:
            words.append(Word("".join(current), current_kind))
            current.clear()

    for char in text:
        kind = _char_kind(char)
        if kind is None:
            flush()
            continue

        if current:
            previous = current[-1]
            if kind is not current_kind:
                flush()
            elif kind is WordKind.ALPHA:
                if previous.islower() and char.isupper():
                    flush()
                elif (
                    previous.isupper()
                    and char.islower()
                    and len(current) > 1
                    and current[-2].isupper()
                ):
                    # ABCd -> AB + Cd
                    current.pop()
                    flush()
                    current.append(previous)

        current.append(char)
        current_kind = kind

    flush()
    return Identifier(source=text, words=tuple(words))
