from typing import Any, Optional


class ConfigurationError(Exception):
    """Raised when resize settings or resizer construction are invalid"""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        provider_name: Optional[str] = None,
        settings: Optional[Any] = None
    ):
        super().__init__(message)
        self.context = context
        self.provider_name = provider_name
        self.settings = settings


class MalformedColorWarning(UserWarning):
    """Fill color could not be parsed, default canvas background is used instead"""


class CropOutOfBoundsError(ValueError):
    pass


class UnknownFormatError(ValueError):
    pass
