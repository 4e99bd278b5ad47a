"""
Domain module for Fieldcase Generator.

This module contains the identifier transformation engine: word splitting,
transform expression parsing, case rendering and joining. It has no
dependency on type introspection or code generation.
"""

from .models import (
    WordKind,
    Word,
    Identifier,
    CharCase,
    NumAlign,
    Uniform,
    FirstRest,
    FirstMiddleLast,
    TransformSpec,
)

from .splitter import split_identifier

from .expression import (
    ExpressionParser,
    parse_expression,
)

from .renderer import (
    render,
    render_word,
    join,
)

from .naming import (
    NameTransformer,
    apply_transform,
    render_name,
    render_names,
)

__all__ = [
    # Core models
    'WordKind',
    'Word',
    'Identifier',
    'CharCase',
    'NumAlign',
    'Uniform',
    'FirstRest',
    'FirstMiddleLast',
    'TransformSpec',

    # Splitting
    'split_identifier',

    # Parsing
    'ExpressionParser',
    'parse_expression',

    # Rendering
    'render',
    'render_word',
    'join',

    # Naming
    'NameTransformer',
    'apply_transform',
    'render_name',
    'render_names',
]
