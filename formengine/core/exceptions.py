from typing import Any, Dict, List, Optional


class FormConfigError(ValueError):
    """Base error for configuration documents that cannot be adopted"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class ParseError(FormConfigError):
    """The document is not valid JSON"""


class ValidationError(FormConfigError):
    """The document parsed but does not describe a usable form"""
