"""Error types raised by the NomadSensei clients"""

from typing import Optional


class NomadSenseiError(Exception):
    """Base class for all NomadSensei errors"""


class NetworkTimeout(NomadSenseiError):
    """An external call exceeded its time bound"""


class ProviderError(NomadSenseiError):
    """An external provider failed or answered with a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(NomadSenseiError):
    """A provider payload did not have the expected shape"""


class ImageReadError(NomadSenseiError):
    """The submitted image could not be read"""


class PermissionDenied(ImageReadError):
    """The operating system refused access to the image"""
