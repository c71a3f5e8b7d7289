"""Shared test fixtures for appveyor-evu tests."""

import logging

import pytest

from appveyor_evu.models.environment import EnvironmentDetail, EnvironmentSummary, VariableSetting
from appveyor_evu.utils.config import set_config


class FakeAppVeyor:
    """In-memory stand-in for the AppVeyor client."""

    def __init__(self, details: list[EnvironmentDetail]):
        self.details = {d.id: d for d in details}
        self.order = [d.id for d in details]
        self.calls: list[tuple[str, ...]] = []

    def list_environments(self, credential: str) -> list[EnvironmentSummary]:
        self.calls.append(("list", credential))
        return [self.details[i].summary() for i in self.order]

    def get_environment_detail(self, credential: str, environment_id: str) -> EnvironmentDetail:
        self.calls.append(("detail", credential, environment_id))
        return self.details[environment_id]


class RecordingWriter:
    """Tabular writer that keeps what it was given."""

    def __init__(self):
        self.writes: list[tuple] = []

    def write(self, destination, rows):
        self.writes.append((destination, [list(r) for r in rows]))


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Keep tests independent of user config files and tokens."""
    monkeypatch.delenv("APPVEYOR_API_TOKEN", raising=False)
    monkeypatch.setattr(
        "appveyor_evu.utils.config.get_config_paths", lambda: []
    )
    set_config(None)
    yield
    set_config(None)
    logger = logging.getLogger("appveyor_evu")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def dev_detail() -> EnvironmentDetail:
    return EnvironmentDetail(
        id="1",
        name="Dev",
        variables=[VariableSetting(name="FOO", value="1")],
    )


@pytest.fixture
def prod_detail() -> EnvironmentDetail:
    return EnvironmentDetail(
        id="2",
        name="Prod",
        variables=[
            VariableSetting(name="FOO", value="3"),
            VariableSetting(name="SECRET", value="s3cr3t", is_encrypted=True),
        ],
    )


@pytest.fixture
def qa_detail() -> EnvironmentDetail:
    return EnvironmentDetail(
        id="3",
        name="QA",
        variables=[
            VariableSetting(name="FOO", value="2"),
            VariableSetting(name="BAR", value="x"),
        ],
    )


@pytest.fixture
def fake_appveyor(dev_detail, prod_detail, qa_detail) -> FakeAppVeyor:
    """Directory listing Dev, Prod, QA in that order."""
    return FakeAppVeyor([dev_detail, prod_detail, qa_detail])


@pytest.fixture
def recording_writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def environments_payload() -> list[dict]:
    """Body of GET /environments as AppVeyor returns it."""
    return [
        {"deploymentEnvironmentId": 1, "name": "Dev", "provider": "Agent"},
        {"deploymentEnvironmentId": 2, "name": "Prod", "provider": "Agent"},
        {"deploymentEnvironmentId": 3, "name": "QA", "provider": "Agent"},
    ]


@pytest.fixture
def settings_payloads() -> dict[str, dict]:
    """Bodies of GET /environments/{id}/settings keyed by id."""

    def wrap(env_id: int, name: str, variables: list[dict]) -> dict:
        return {
            "environment": {
                "deploymentEnvironmentId": env_id,
                "name": name,
                "settings": {"environmentVariables": variables},
            }
        }

    return {
        "1": wrap(1, "Dev", [{"name": "FOO", "value": {"isEncrypted": False, "value": "1"}}]),
        "2": wrap(2, "Prod", [{"name": "FOO", "value": {"isEncrypted": False, "value": "3"}}]),
        "3": wrap(
            3,
            "QA",
            [
                {"name": "FOO", "value": {"isEncrypted": False, "value": "2"}},
                {"name": "BAR", "value": {"isEncrypted": False, "value": "x"}},
            ],
        ),
    }


@pytest.fixture
def make_appveyor():
    """Factory for fake clients over arbitrary environment details."""
    return FakeAppVeyor
