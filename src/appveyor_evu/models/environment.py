"""Environment data models returned by the AppVeyor API clients."""

from __future__ import annotations

from pydantic import BaseModel, Field


class EnvironmentSummary(BaseModel):
    """An environment as listed in the account's environment directory."""

    model_config = {"frozen": True}

    id: str = Field(description="Deployment environment identifier")
    name: str = Field(description="Environment name as shown in AppVeyor")

    def __str__(self) -> str:
        return f"{self.name} (id={self.id})"


class VariableSetting(BaseModel):
    """A single environment variable configured on an environment.

    ``value`` is ``None`` when the variable is defined without a value.
    """

    model_config = {"frozen": True}

    name: str = Field(description="Variable name")
    value: str | None = Field(default=None, description="Variable value")
    is_encrypted: bool = Field(
        default=False, description="Whether AppVeyor stores the value encrypted"
    )


class EnvironmentDetail(BaseModel):
    """An environment together with its variable settings."""

    model_config = {"frozen": True}

    id: str = Field(description="Deployment environment identifier")
    name: str = Field(description="Environment name")
    variables: list[VariableSetting] = Field(
        default_factory=list, description="Configured environment variables"
    )

    def summary(self) -> EnvironmentSummary:
        """Strip the variables off this environment."""
        return EnvironmentSummary(id=self.id, name=self.name)
