"""
Parser for transform expressions.

A transform expression controls how an identifier is rendered::

    expr      := [transform] ['|' separator]
    transform := word_rule{0,3} [num_align]     (atoms separated by whitespace)
    word_rule := char_case{1,3}
    char_case := 'c' | 'C' | '*'                (lower / upper / keep)
    num_align := '1__' | '__1' | '_1_'          (left / right / middle)

Examples: ``"c Cc"`` renders camelCase, ``"C|_"`` renders SCREAMING_SNAKE,
``"1__|_"`` keeps the case and glues digits to the word before them.
"""

import logging
from typing import List, Optional

from ..constants import ExpressionSyntax
from ..exceptions import MalformedExpressionError
from .models import CharCase, NumAlign, TransformSpec, WordCaseRule, positional


logger = logging.getLogger(__name__)


class ExpressionParser:
    """Reads one transform expression into a TransformSpec."""

    def __init__(self, expression: str):
        if not isinstance(expression, str):
            raise TypeError(f"Expected string, got {type(expression).__name__}")
        self.expression = expression

    def parse(self) -> TransformSpec:
        transform, mark, separator = self.expression.partition(ExpressionSyntax.SEPARATOR_MARK)

        word_rules: List[WordCaseRule] = []
        num_align: Optional[NumAlign] = None

        for atom in transform.split():
            if num_align is not None:
                self._fail(atom, f"unexpected atom after numeral alignment '{num_align.value}'")

            if atom in ExpressionSyntax.ALIGN_LITERALS:
                num_align = NumAlign(atom)
                continue

            if len(word_rules) == ExpressionSyntax.MAX_WORD_RULES:
                self._fail(
                    atom,
                    f"more than {ExpressionSyntax.MAX_WORD_RULES} word rules",
                )
            word_rules.append(self._parse_word_rule(atom))

        spec = TransformSpec(
            case_spec=positional(tuple(word_rules)) if word_rules else None,
            num_align=num_align,
            separator=separator if mark else None,
        )
        logger.debug(f"Parsed transform expression {self.expression!r}: {spec}")
        return spec

    def _parse_word_rule(self, atom: str) -> WordCaseRule:
        for char in atom:
            if char not in ExpressionSyntax.CASE_LETTERS:
                has_case_letter = any(c in ExpressionSyntax.CASE_LETTERS for c in atom)
                if not has_case_letter and ("1" in atom or "_" in atom):
                    reason = (
                        f"unknown numeral alignment, expected one of "
                        f"{', '.join(sorted(ExpressionSyntax.ALIGN_LITERALS))}"
                    )
                else:
                    reason = f"invalid character {char!r}, expected 'c', 'C' or '*'"
                self._fail(atom, reason)

        if len(atom) > ExpressionSyntax.MAX_CHAR_RULES:
            self._fail(
                atom,
                f"a word rule takes at most {ExpressionSyntax.MAX_CHAR_RULES} case letters",
            )
        return positional(tuple(CharCase(char) for char in atom))

    def _fail(self, token: str, reason: str):
        raise MalformedExpressionError(token, reason, expression=self.expression)


def parse_expression(expression: str) -> TransformSpec:
    """
    Parse a transform expression.

    Args:
        expression: The expression text, e.g. ``"CcC cCc CcC _1_|*-*"``

    Returns:
        The parsed TransformSpec

    Raises:
        MalformedExpressionError: If the expression violates the grammar
    """
    return ExpressionParser(expression).parse()
