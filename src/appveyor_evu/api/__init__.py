"""AppVeyor API clients."""

from appveyor_evu.api.base import (
    ApiError,
    AuthorizationError,
    DecodeError,
    EnvironmentDetailSource,
    EnvironmentDirectory,
    TransportError,
)
from appveyor_evu.api.appveyor import AppVeyorClient

__all__ = [
    "ApiError",
    "AuthorizationError",
    "DecodeError",
    "EnvironmentDetailSource",
    "EnvironmentDirectory",
    "TransportError",
    "AppVeyorClient",
]
