#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/exceptions.py
"""Custom exceptions for the bbml library.

Rendering never fails on malformed or unrecognised markup: unknown tags are
degraded to error-styled output instead. The exceptions defined here cover
the few conditions that cannot be normalised away.

Exception Hierarchy
-------------------
- BbmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class passed to a renderer)
    - LinkNotFoundError (link index not present in the registry)

  - ParsingError (markup could not be turned into a tree)

  - RenderingError (document generation failures)
    - RecursionLimitExceeded (markup nested deeper than allowed)

"""

from __future__ import annotations

from typing import Any


class BbmlError(Exception):
    """Base exception class for all bbml-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(BbmlError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong type is supplied.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received

    """

    def __init__(self, component_name: str, expected_type: type, received_type: type):
        """Initialize the invalid options error."""
        message = (
            f"{component_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'."
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class LinkNotFoundError(ValidationError):
    """Exception raised when a link index has no registered target.

    Parameters
    ----------
    index : int
        The link index that was requested
    available : int
        Number of links in the registry

    """

    def __init__(self, index: int, available: int):
        """Initialize the link lookup error."""
        if available:
            message = f"No link found with index {index} (valid indices are 0-{available - 1})"
        else:
            message = f"No link found with index {index} (document has no links)"
        super().__init__(message, parameter_name="index", parameter_value=index)
        self.index = index
        self.available = available


class ParsingError(BbmlError):
    """Exception raised when markup cannot be parsed into a node tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(BbmlError):
    """Exception raised when document rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class RecursionLimitExceeded(RenderingError):
    """Exception raised when markup is nested deeper than the configured limit.

    Parameters
    ----------
    depth : int or None
        Nesting depth at which the limit was hit, or None when the interpreter
        stack ran out before ``max_depth`` was reached
    max_depth : int
        Configured maximum nesting depth
    rendering_stage : str, optional
        Either ``"parse"`` (tree conversion) or ``"render"``
    original_error : Exception, optional
        The underlying :class:`RecursionError`, if any

    """

    def __init__(
        self,
        depth: int | None,
        max_depth: int,
        rendering_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the recursion limit error."""
        if depth is None:
            message = f"Markup nesting exhausted the interpreter stack before the maximum depth of {max_depth}"
        else:
            message = f"Markup nesting depth {depth} exceeds the maximum of {max_depth}"
        super().__init__(message, rendering_stage=rendering_stage, original_error=original_error)
        self.depth = depth
        self.max_depth = max_depth


__all__ = [
    "BbmlError",
    "ValidationError",
    "InvalidOptionsError",
    "LinkNotFoundError",
    "ParsingError",
    "RenderingError",
    "RecursionLimitExceeded",
]
