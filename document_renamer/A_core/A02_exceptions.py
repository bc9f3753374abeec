# document_renamer/A_core/A02_exceptions.py
"""
Exception hierarchy for the document renamer.

Hierarchy:
    RenamerError (base)
    ├── ConfigurationError     # Invalid config file or value
    ├── NoDateFoundError       # No calendar-valid date in the input
    └── FileRenameError        # Filesystem rename/undo failures

Only NoDateFoundError can come out of the normalization pipeline itself;
every other stage falls back to a default instead of raising.

Usage:
    from A_core.A02_exceptions import NoDateFoundError

    try:
        name = normalizer.normalize(stem)
    except NoDateFoundError as e:
        logger.error(f"Could not rename: {e.message}")
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class RenamerError(Exception):
    """
    Base exception for all renamer errors.

    Attributes:
        message: Human-readable error description.
        context: Additional context data for debugging.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigurationError(RenamerError):
    """
    Raised when configuration is invalid or cannot be read.

    Examples:
        - Unparseable YAML file
        - Unknown century policy
        - Classification rule with an invalid regex
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        actual_value: Optional[Any] = None,
    ):
        context = {}
        if config_key:
            context["key"] = config_key
        if expected_type:
            context["expected"] = expected_type
        if actual_value is not None:
            context["actual"] = repr(actual_value)

        super().__init__(message, context)
        self.config_key = config_key
        self.expected_type = expected_type
        self.actual_value = actual_value


class NoDateFoundError(RenamerError):
    """
    Raised when no calendar-valid date exists anywhere in the input.

    This is terminal for the invocation: callers keep the original name.
    """

    def __init__(
        self,
        message: str = "no date found",
        input_text: Optional[str] = None,
    ):
        context = {}
        if input_text:
            # Truncate for logging
            context["input"] = input_text[:100] + "..." if len(input_text) > 100 else input_text

        super().__init__(message, context)
        self.input_text = input_text


class FileRenameError(RenamerError):
    """
    Raised when a file cannot be renamed or restored.

    Examples:
        - Target name already exists
        - Source file disappeared between planning and applying
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        target_path: Optional[str] = None,
    ):
        context = {}
        if file_path:
            context["file"] = file_path
        if target_path:
            context["target"] = target_path

        super().__init__(message, context)
        self.file_path = file_path
        self.target_path = target_path


__all__ = [
    "RenamerError",
    "ConfigurationError",
    "NoDateFoundError",
    "FileRenameError",
]
