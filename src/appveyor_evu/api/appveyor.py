"""AppVeyor environments API client."""

from __future__ import annotations

from typing import Any

import httpx

from appveyor_evu.api.base import AuthorizationError, DecodeError, TransportError
from appveyor_evu.models.environment import (
    EnvironmentDetail,
    EnvironmentSummary,
    VariableSetting,
)
from appveyor_evu.utils.config import DEFAULT_API_URL
from appveyor_evu.utils.logging import get_logger

logger = get_logger(__name__)


class AppVeyorClient:
    """Client for the AppVeyor deployment environments API.

    Implements both ``EnvironmentDirectory`` and ``EnvironmentDetailSource``.
    Every call makes a single request; failures are raised, never retried.

    Example:
        client = AppVeyorClient()
        environments = client.list_environments(token)
        detail = client.get_environment_detail(token, environments[0].id)
    """

    ENVIRONMENTS_PATH = "environments"
    ENVIRONMENT_SETTINGS_PATH = "environments/{id}/settings"

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the AppVeyor client.

        Args:
            base_url: Base URL of the AppVeyor API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self, credential: str) -> httpx.Client:
        """Create an HTTP client carrying the bearer credential."""
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={
                "Accept": "application/json",
                "Authorization": f"Bearer {credential}",
            },
        )

    def _get_json(self, credential: str, path: str) -> Any:
        """GET a relative path and decode the JSON body.

        Raises:
            TransportError: On connection failures and timeouts
            AuthorizationError: On any non-2xx status
            DecodeError: If the body is not JSON
        """
        url = f"{self._base_url}{path}"
        logger.debug("Invoking %s...", url)

        with self._get_client(credential) as client:
            try:
                response = client.get(path)
            except httpx.TransportError as e:
                raise TransportError(f"Could not reach {url}: {e}", url=url) from e

        logger.debug("HTTP response code returned: %s.", response.status_code)

        if not response.is_success:
            if response.status_code in (401, 403):
                message = f"Credential rejected by {url} ({response.status_code})"
            else:
                message = f"Request to {url} failed with status {response.status_code}"
            raise AuthorizationError(message, status_code=response.status_code, url=url)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}", url=url) from e

        logger.debug("Results parsed with success.")
        return data

    def list_environments(self, credential: str) -> list[EnvironmentSummary]:
        """List every environment visible to the credential."""
        url = f"{self._base_url}{self.ENVIRONMENTS_PATH}"
        data = self._get_json(credential, self.ENVIRONMENTS_PATH)

        if not isinstance(data, list):
            raise DecodeError(
                f"Expected a list of environments from {url}, got {type(data).__name__}",
                url=url,
            )

        try:
            return [_parse_summary(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"Unexpected environment list from {url}: {e}", url=url) from e

    def get_environment_detail(
        self, credential: str, environment_id: str
    ) -> EnvironmentDetail:
        """Fetch an environment and its variable settings."""
        path = self.ENVIRONMENT_SETTINGS_PATH.format(id=environment_id)
        url = f"{self._base_url}{path}"
        data = self._get_json(credential, path)

        try:
            return _parse_detail(data["environment"])
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"Unexpected environment settings from {url}: {e}", url=url) from e


def _parse_summary(item: dict[str, Any]) -> EnvironmentSummary:
    _expect_mapping(item, "environment")
    return EnvironmentSummary(id=str(item["deploymentEnvironmentId"]), name=item["name"])


def _parse_detail(environment: dict[str, Any]) -> EnvironmentDetail:
    _expect_mapping(environment, "environment")

    settings = environment.get("settings")
    if settings is None:
        settings = {}
    _expect_mapping(settings, "settings")

    raw_variables = settings.get("environmentVariables")
    if raw_variables is None:
        raw_variables = []
    if not isinstance(raw_variables, list):
        raise TypeError(
            f"environmentVariables must be a list, got {type(raw_variables).__name__}"
        )

    return EnvironmentDetail(
        id=str(environment["deploymentEnvironmentId"]),
        name=environment["name"],
        variables=[_parse_variable(v) for v in raw_variables],
    )


def _parse_variable(item: dict[str, Any]) -> VariableSetting:
    _expect_mapping(item, "environment variable")

    # AppVeyor wraps values as {"isEncrypted": bool, "value": str}
    raw = item.get("value")
    if isinstance(raw, dict):
        return VariableSetting(
            name=item["name"],
            value=raw.get("value"),
            is_encrypted=bool(raw.get("isEncrypted", False)),
        )
    return VariableSetting(name=item["name"], value=raw)


def _expect_mapping(value: Any, what: str) -> None:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
