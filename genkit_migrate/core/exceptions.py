"""
Custom exceptions for genkit-migrate.

This module defines the exception classes raised by the analysis,
transformation and generation stages. Only the command line layer turns
them into a process exit.
"""

from typing import Any, Dict, Optional


class GenkitMigrateError(Exception):
    """Base exception class for genkit-migrate errors."""
    
    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(GenkitMigrateError):
    """Raised when the tool configuration is invalid."""
    pass


class SourceParseError(GenkitMigrateError):
    """Raised when a source file is not valid Python."""
    
    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        line: Optional[int] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.file_path = file_path
        self.line = line


class ProjectIOError(GenkitMigrateError):
    """Raised when a project file or the output tree cannot be read or written."""
    
    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class TemplateRenderError(GenkitMigrateError):
    """Raised when a rewrite template fails to render."""
    
    def __init__(
        self,
        message: str,
        template: Optional[str] = None,
        step: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.template = template
        self.step = step


class UnsupportedFormatError(GenkitMigrateError):
    """Raised when an output format is requested that no reporter implements."""
    
    def __init__(self, format: str, **kwargs):
        super().__init__(f"Unsupported output format: {format}", **kwargs)
        self.format = format
