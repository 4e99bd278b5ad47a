"""
Case rendering and joining of split identifiers.
"""

from typing import List, Optional

from .models import Identifier, NumAlign, TransformSpec, Word, WordCaseRule


def render_word(word: Word, rule: Optional[WordCaseRule]) -> str:
    """Apply a word case rule character by character."""
    if rule is None:
        return word.text
    length = len(word.text)
    return "".join(
        rule.resolve(index, length).apply(char) for index, char in enumerate(word.text)
    )


def render(identifier: Identifier, spec: TransformSpec) -> List[str]:
    """
    Render the words of an identifier into the units to be joined.

    Word and character roles (first, middle, last) are taken from their
    position in the split identifier. When numeral alignment is set, a digit
    run is glued to the previous unit (LEFT) or to the next one (RIGHT); with
    no neighbour on that side, or under MIDDLE, it stays a unit of its own.

    Args:
        identifier: The split identifier
        spec: The parsed transform expression

    Returns:
        Rendered units in order
    """
    words = identifier.words
    count = len(words)
    units: List[str] = []
    carried = ""

    for index, word in enumerate(words):
        rule = spec.case_spec.resolve(index, count) if spec.case_spec else None
        text = carried + render_word(word, rule)
        carried = ""

        if word.is_digit and spec.num_align is NumAlign.LEFT and units:
            units[-1] += text
        elif word.is_digit and spec.num_align is NumAlign.RIGHT and index < count - 1:
            carried = text
        else:
            units.append(text)

    return units


def join(units: List[str], separator: str = "") -> str:
    """Join rendered units with the separator."""
    return separator.join(units)
