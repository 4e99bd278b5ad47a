"""
Custom exception hierarchy for Fieldcase Generator.

This module provides the exceptions raised while parsing transform expressions,
collecting members from type definitions and generating accessor code. Every
error carries context and recovery suggestions for the diagnostic shown to users.
"""

from typing import Dict, Any, Optional, List


class FieldcaseGeneratorError(Exception):
    """
    Base exception for all Fieldcase Generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [self.message]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class MalformedExpressionError(FieldcaseGeneratorError, ValueError):
    """Raised when a transform expression does not match the expression grammar."""

    def __init__(self, token: str, reason: str, expression: str = None, **kwargs):
        self.token = token
        self.reason = reason
        self.expression = expression

        context = kwargs.get('context', {})
        context['token'] = repr(token)
        if expression is not None:
            context['expression'] = repr(expression)

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Word rules use only 'c' (lower), 'C' (upper) and '*' (keep), one to three letters each",
                "At most three word rules may be given, e.g. 'CcC cCc CcC'",
                "Numeral alignment must be the last atom: '1__', '_1_' or '__1'",
                "Put the separator after a single '|', e.g. 'c|_'"
            ]

        super().__init__(
            f"Malformed transform expression at {token!r}: {reason}",
            context=context,
            suggestions=suggestions,
            error_code="MALFORMED_EXPRESSION"
        )


class MemberOptionsError(FieldcaseGeneratorError):
    """Raised when per-member naming options are invalid."""

    def __init__(self, message: str, type_name: str = None, member: str = None, **kwargs):
        context = kwargs.get('context', {})
        if type_name:
            context['type'] = type_name
        if member:
            context['member'] = member

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Only the 'name' and 'transform' options are recognized",
                "Option values must be strings",
                "Check that every key of __fieldcase__ names an existing member"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="MEMBER_OPTIONS_ERROR"
        )


class TypeIntrospectionError(FieldcaseGeneratorError):
    """Raised when members cannot be collected from a type definition."""

    def __init__(self, message: str, type_name: str = None, expected: str = None, **kwargs):
        context = kwargs.get('context', {})
        if type_name:
            context['type'] = type_name
        if expected:
            context['expected'] = expected

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Use fields() with dataclasses, pydantic models or annotated classes",
                "Use variants() with enum.Enum subclasses",
                "Make sure the type declares at least one member"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="INTROSPECTION_ERROR"
        )


class CodeGenerationError(FieldcaseGeneratorError):
    """Raised when accessor code generation fails."""

    def __init__(
        self,
        message: str,
        component: str = None,
        type_name: str = None,
        member: str = None,
        **kwargs
    ):
        context = kwargs.get('context', {})
        if component:
            context['component'] = component  # e.g., 'fields', 'variants', 'module'
        if type_name:
            context['type'] = type_name
        if member:
            context['member'] = member

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Fix the transform expression of the member named above",
                "Run 'fieldcase-generator render' to try the expression on a single name",
                "Check the output path is writable"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CODE_GENERATION_ERROR"
        )


class ConfigurationError(FieldcaseGeneratorError):
    """Raised when a definition file is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the definition file YAML syntax",
                "Verify every type has a name, a kind and members",
                "Check the documentation for definition file examples"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )
