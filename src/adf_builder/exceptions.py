#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the adf_builder library.

This module defines specialized exception classes for the error conditions
that can occur while building and rendering ADF documents.

Exception Hierarchy
-------------------
- AdfBuilderError (base exception)

  - ValidationError (caller input validation)
    - MissingRequiredFieldError (required value absent or empty)
    - InvalidMarkError (mark rejected at finalization)
    - InvalidOptionsError (wrong options class for renderer)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class AdfBuilderError(Exception):
    """Base exception class for all adf_builder-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(AdfBuilderError):
    """Exception raised for invalid input supplied by the caller.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class MissingRequiredFieldError(ValidationError):
    """Exception raised when a required field is missing or empty.

    Raised eagerly, at construction time, e.g. when a text node is created
    with an empty string.

    Parameters
    ----------
    field_name : str
        Name of the missing field
    message : str, optional
        Custom error message. Defaults to "<field_name> is required".

    Attributes
    ----------
    field_name : str
        Name of the missing field

    """

    def __init__(self, field_name: str, message: str | None = None):
        """Initialize the error with the name of the missing field."""
        super().__init__(message or f"{field_name} is required", parameter_name=field_name)
        self.field_name = field_name


class InvalidMarkError(ValidationError):
    """Exception raised when a text mark fails validation.

    Mark validation is deferred: this is raised when a text node is
    finalized into a heading or paragraph, never when it is constructed.

    Parameters
    ----------
    mark : any
        The offending mark input
    message : str, optional
        Custom error message

    Attributes
    ----------
    mark : any
        The offending mark input

    """

    def __init__(self, mark: Any, message: str | None = None):
        """Initialize the error with the rejected mark."""
        super().__init__(message or f"Invalid mark: {mark!r}", parameter_name="marks", parameter_value=mark)
        self.mark = mark


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received the wrong options
    expected_type : type
        The options class that was expected
    received_type : type
        The options class that was actually provided

    """

    def __init__(self, renderer_name: str, expected_type: type, received_type: type):
        """Initialize the error with expected and received option types."""
        message = (
            f"Renderer '{renderer_name}' expected options of type '{expected_type.__name__}', "
            f"but received '{received_type.__name__}'"
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(AdfBuilderError):
    """Exception raised when rendering a document fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage at which rendering failed (e.g. "serialization", "output")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        rendering_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    output_path : str, optional
        Path that could not be written
    original_error : Exception, optional
        The underlying I/O error

    """

    def __init__(
        self,
        message: str,
        output_path: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the write error with the target path."""
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.output_path = output_path
