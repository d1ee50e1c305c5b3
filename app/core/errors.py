from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    PARSE = "parse"
    MEDIA = "media"


class AdvisoryError(Exception):
    """Base error for everything that can go wrong while producing an advisory."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(self, message: str = "", kind: Optional[ErrorKind] = None) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class ConfigurationError(AdvisoryError):
    """Raised when the Gemini credential is missing. Not recoverable without reconfiguration."""

    kind = ErrorKind.CONFIGURATION


class TransportError(AdvisoryError):
    kind = ErrorKind.TRANSPORT


class ResponseParseError(AdvisoryError):
    kind = ErrorKind.PARSE


class MediaError(AdvisoryError):
    kind = ErrorKind.MEDIA
