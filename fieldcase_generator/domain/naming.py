"""
Name rendering for struct fields and enum variants.

This module ties the splitter, the expression parser and the renderer
together. It is the single entry point used by the member collectors and
the accessor code generator.
"""

from typing import Iterable, List, Optional, Tuple

from .expression import parse_expression
from .models import TransformSpec
from .renderer import join, render
from .splitter import split_identifier


def apply_transform(name: str, spec: TransformSpec) -> str:
    """Split, render and join a name according to a parsed expression."""
    return join(render(split_identifier(name), spec), spec.joiner)


def render_name(
    raw_identifier: str,
    override_name: Optional[str] = None,
    transform_expr: Optional[str] = None,
) -> str:
    """
    Render the public name of a field or variant.

    Without a transform expression the override name (or, failing that, the
    raw identifier) is returned verbatim. With one, the override name or raw
    identifier is split into words and rendered.

    Args:
        raw_identifier: The field or variant identifier as declared
        override_name: Optional replacement name
        transform_expr: Optional transform expression

    Returns:
        The rendered name

    Raises:
        MalformedExpressionError: If the transform expression is invalid

    Example:
        >>> render_name("AVeryLong5Variant", transform_expr="c Cc")
        'aVeryLong5Variant'
        >>> render_name("access_token", override_name="accessToken")
        'accessToken'
    """
    name = override_name if override_name is not None else raw_identifier
    if transform_expr is None:
        return name
    return apply_transform(name, parse_expression(transform_expr))


def render_names(
    members: Iterable[Tuple[str, Optional[str], Optional[str]]]
) -> List[str]:
    """
    Render a batch of ``(raw_identifier, override_name, transform_expr)`` triples.

    Stops at the first malformed expression.
    """
    return [render_name(raw, override, expr) for raw, override, expr in members]


class NameTransformer:
    """
    A transform expression parsed once and applied to many names.
    """

    def __init__(self, spec: TransformSpec, expression: Optional[str] = None):
        self.spec = spec
        self.expression = expression

    @classmethod
    def from_expression(cls, expression: str) -> "NameTransformer":
        return cls(parse_expression(expression), expression)

    def apply(self, name: str) -> str:
        return apply_transform(name, self.spec)

    def __call__(self, name: str) -> str:
        return self.apply(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.expression!r})"
