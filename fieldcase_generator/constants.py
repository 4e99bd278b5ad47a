"""
Centralized constants for Fieldcase Generator.

This module contains the transform expression literals, member option keys and
default configuration values shared by the engine, the collectors and the
code generator.
"""

from typing import Dict, FrozenSet


# =============================================================================
# TRANSFORM EXPRESSION GRAMMAR
# =============================================================================

class ExpressionSyntax:
    """Literal tokens of the transform expression language."""

    # Splits the case/alignment part from the verbatim separator
    SEPARATOR_MARK = "|"

    # Character case letters
    LOWER = "c"
    UPPER = "C"
    KEEP = "*"
    CASE_LETTERS: FrozenSet[str] = frozenset({LOWER, UPPER, KEEP})

    # Numeral alignment literals
    ALIGN_LEFT = "1__"
    ALIGN_RIGHT = "__1"
    ALIGN_MIDDLE = "_1_"
    ALIGN_LITERALS: FrozenSet[str] = frozenset({ALIGN_LEFT, ALIGN_RIGHT, ALIGN_MIDDLE})

    # Arity limits (first / middle / last)
    MAX_CHAR_RULES = 3
    MAX_WORD_RULES = 3


# =============================================================================
# MEMBER OPTIONS
# =============================================================================

class MemberOptions:
    """Keys used to attach naming options to struct fields and enum variants."""

    NAME = "name"
    TRANSFORM = "transform"
    ALL: FrozenSet[str] = frozenset({NAME, TRANSFORM})

    # Class attribute mapping member identifiers to their options
    CLASS_ATTRIBUTE = "__fieldcase__"

    # Key inside dataclass field metadata / pydantic json_schema_extra
    METADATA_KEY = "fieldcase"


class AccessorNames:
    """Names of the generated accessor methods."""

    FIELDS = "fields"
    VARIANTS = "variants"

    BY_KIND: Dict[str, str] = {
        "struct": FIELDS,
        "enum": VARIANTS,
    }

    # Builtins the generated module looks up while defining each class
    GENERATED_CODE_BUILTINS = ("staticmethod", "tuple", "str")



# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    OUTPUT_FILE = "./fieldcase_accessors.py"
    MODULE_DOCSTRING = "Accessors generated by fieldcase-generator. Do not edit."
    FORMAT_CODE = True
    BLACK_LINE_LENGTH = 120
