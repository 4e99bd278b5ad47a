"""
Fieldcase Generator.

Renders struct field and enum variant names through a small transform
expression language and generates static accessors returning them.
"""

from .domain import NameTransformer, parse_expression, render_name, render_names, split_identifier
from .exceptions import (
    FieldcaseGeneratorError,
    MalformedExpressionError,
    MemberOptionsError,
    TypeIntrospectionError,
    CodeGenerationError,
    ConfigurationError,
)
from .introspection import fieldcase, fields, variants

__version__ = "0.1.0"

__all__ = [
    'NameTransformer',
    'parse_expression',
    'render_name',
    'render_names',
    'split_identifier',
    'fieldcase',
    'fields',
    'variants',
    'FieldcaseGeneratorError',
    'MalformedExpressionError',
    'MemberOptionsError',
    'TypeIntrospectionError',
    'CodeGenerationError',
    'ConfigurationError',
]
