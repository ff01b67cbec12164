"""
Custom exceptions for the glossary builder.
Provides a clear error hierarchy and meaningful error messages.
"""

from contextlib import contextmanager
from typing import Optional, Dict, Any, Type
import logging

__all__ = [
    # Base
    'GlossaryBuilderError',
    # Contract
    'InvalidArgumentError', 'TermNotFoundError', 'InvalidGlossaryError',
    # Parser
    'ParserError', 'GlossaryReadError', 'DuplicateTermError',
    # Formatter
    'FormatterError', 'OutputError',
    # Pipeline
    'PipelineError', 'BuildPipelineError', 'ConfigurationError',
    # Utilities
    'error_context', 'wrap_error',
]


# ============================================================================
# BASE EXCEPTION
# ============================================================================

class GlossaryBuilderError(Exception):
    """
    Base exception for all glossary builder errors.

    All custom exceptions inherit from this class for unified error handling.
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context."""
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


# ============================================================================
# CONTRACT EXCEPTIONS
# ============================================================================

class InvalidArgumentError(GlossaryBuilderError, ValueError):
    """Raised when a caller breaks a function precondition."""

    def __init__(self, message: str, argument: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, argument=argument, **context)
        self.argument = argument


class TermNotFoundError(GlossaryBuilderError, KeyError):
    """Raised when a definition is requested for a term the glossary lacks."""

    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term


class InvalidGlossaryError(GlossaryBuilderError):
    """Raised when the term list and the definition mapping disagree."""
    pass


# ============================================================================
# PARSER EXCEPTIONS
# ============================================================================

class ParserError(GlossaryBuilderError):
    """Base exception for glossary source parsing errors."""
    pass


class GlossaryReadError(ParserError):
    """Raised when the glossary source cannot be opened or read."""

    def __init__(self, message: str, file_path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, file_path=file_path, **context)
        self.file_path = file_path


class DuplicateTermError(ParserError):
    """Raised when a term is defined twice and duplicates are rejected."""

    def __init__(
        self,
        message: str,
        term: Optional[str] = None,
        line_number: Optional[int] = None,
        **context: Any
    ) -> None:
        super().__init__(message, term=term, line_number=line_number, **context)
        self.term = term
        self.line_number = line_number


# ============================================================================
# FORMATTER EXCEPTIONS
# ============================================================================

class FormatterError(GlossaryBuilderError):
    """Base exception for page rendering and output errors."""
    pass


class OutputError(FormatterError):
    """Raised when a page cannot be written to the output directory."""

    def __init__(self, message: str, output_path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, output_path=output_path, **context)
        self.output_path = output_path


# ============================================================================
# PIPELINE EXCEPTIONS
# ============================================================================

class PipelineError(GlossaryBuilderError):
    """Base exception for pipeline errors."""
    pass


class BuildPipelineError(PipelineError):
    """Raised when a stage of the site build fails."""

    def __init__(self, message: str, stage: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, stage=stage, **context)
        self.stage = stage


class ConfigurationError(PipelineError):
    """Raised when configuration is missing, malformed or invalid."""

    def __init__(self, message: str, component: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, component=component, **context)
        self.component = component


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def wrap_error(
    error: Exception,
    error_class: Type[GlossaryBuilderError],
    message: Optional[str] = None,
    **context: Any
) -> GlossaryBuilderError:
    """
    Wrap an exception in a custom exception type.

    Args:
        error: Original exception
        error_class: Exception class to wrap with
        message: Optional custom message
        **context: Extra context passed to the new exception

    Returns:
        Wrapped exception with ``__cause__`` set to the original

    Raises:
        TypeError: If error_class is not a GlossaryBuilderError subclass

    Example:
        >>> try:
        ...     open("missing.txt")
        ... except OSError as e:
        ...     raise wrap_error(e, GlossaryReadError, "Cannot read glossary")
    """
    if not issubclass(error_class, GlossaryBuilderError):
        raise TypeError(
            f"error_class must be subclass of GlossaryBuilderError, "
            f"got {error_class.__name__}"
        )

    error_msg = f"{message}: {error}" if message else str(error)
    wrapped = error_class(error_msg, **context)
    wrapped.__cause__ = error
    return wrapped


@contextmanager
def error_context(
    operation: str,
    error_class: Type[GlossaryBuilderError] = GlossaryBuilderError,
    logger: Optional[logging.Logger] = None,
    **context: Any
):
    """
    Context manager for consistent error handling and wrapping.

    Args:
        operation: Name of operation being performed
        error_class: Exception class to wrap errors with
        logger: Optional logger for error logging
        **context: Extra context attached to the wrapped exception

    Yields:
        None

    Raises:
        error_class: Wrapped exception if error occurs

    Example:
        >>> with error_context("writing pages", OutputError):
        ...     writer.write(pages)
    """
    try:
        yield
    except error_class:
        # Already the correct type, just reraise
        raise
    except KeyboardInterrupt:
        raise
    except Exception as e:
        if logger:
            logger.error(f"Error during {operation}: {e}", exc_info=True)

        raise wrap_error(e, error_class, f"Error during {operation}", **context)
