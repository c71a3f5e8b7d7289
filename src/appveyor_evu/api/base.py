"""Base API client protocols and error types."""

from typing import Protocol, runtime_checkable

from appveyor_evu.models.environment import EnvironmentDetail, EnvironmentSummary
from appveyor_evu.utils.errors import EvuError


class ApiError(EvuError):
    """Base exception for AppVeyor API operations."""


class TransportError(ApiError):
    """The API could not be reached, or the request timed out."""

    def __init__(self, message: str, url: str | None = None) -> None:
        details = {"url": url} if url else {}
        super().__init__(message, code="TRANSPORT_ERROR", details=details)
        self.url = url


class AuthorizationError(ApiError):
    """The API rejected the credential or answered with a non-success status."""

    def __init__(
        self,
        message: str = "Authorization failed",
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        details: dict[str, object] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if url:
            details["url"] = url
        super().__init__(message, code="AUTH_ERROR", details=details)
        self.status_code = status_code
        self.url = url


class DecodeError(ApiError):
    """The response body did not parse into the expected shape."""

    def __init__(self, message: str, url: str | None = None) -> None:
        details = {"url": url} if url else {}
        super().__init__(message, code="DECODE_ERROR", details=details)
        self.url = url


@runtime_checkable
class EnvironmentDirectory(Protocol):
    """Protocol for clients that list the environments an account can see.

    Example:
        class StaticDirectory:
            def __init__(self, environments):
                self.environments = environments

            def list_environments(self, credential):
                return list(self.environments)
    """

    def list_environments(self, credential: str) -> list[EnvironmentSummary]:
        """List every environment visible to the credential.

        Args:
            credential: API bearer token

        Returns:
            Environment summaries, in the order the API returned them

        Raises:
            TransportError: If the API cannot be reached
            AuthorizationError: If the credential is rejected
            DecodeError: If the response cannot be parsed
        """
        ...


@runtime_checkable
class EnvironmentDetailSource(Protocol):
    """Protocol for clients that fetch one environment's variable settings."""

    def get_environment_detail(
        self, credential: str, environment_id: str
    ) -> EnvironmentDetail:
        """Fetch an environment and its variables.

        Args:
            credential: API bearer token
            environment_id: Deployment environment identifier

        Returns:
            The environment detail

        Raises:
            TransportError: If the API cannot be reached
            AuthorizationError: If the credential is rejected
            DecodeError: If the response cannot be parsed
        """
        ...
