"""Unit tests for the errors and logging modules."""

import logging

import pytest

from appveyor_evu.api.base import AuthorizationError, DecodeError, TransportError
from appveyor_evu.utils.errors import (
    ConfigurationError,
    EvuError,
    OutputWriteError,
    validate_api_token,
    validate_environment_names,
)
from appveyor_evu.utils.logging import (
    configure_logging,
    get_logger,
    get_logger_with_context,
    resolve_level,
)


class TestEvuError:
    """Tests for base EvuError."""

    def test_basic_error(self):
        error = EvuError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.code == "UNKNOWN_ERROR"
        assert error.details == {}

    def test_to_error_info(self):
        error = EvuError("Test error", code="TEST_ERROR", details={"key": "value"})
        info = error.to_error_info()

        assert info.code == "TEST_ERROR"
        assert info.message == "Test error"
        assert info.details == {"key": "value"}
        assert str(info) == "[TEST_ERROR] Test error"


class TestErrorKinds:
    """Tests for the specific error kinds."""

    def test_configuration_error(self):
        error = ConfigurationError("Missing", config_key="api.token")
        assert error.code == "CONFIG_ERROR"
        assert error.details["config_key"] == "api.token"

    def test_output_write_error(self):
        error = OutputWriteError("Could not write", path="/tmp/x.csv")
        assert error.code == "IO_ERROR"
        assert error.details["path"] == "/tmp/x.csv"

    def test_authorization_error(self):
        error = AuthorizationError("Denied", status_code=401, url="https://x/api/environments")
        assert error.code == "AUTH_ERROR"
        assert error.details == {"status_code": 401, "url": "https://x/api/environments"}

    def test_api_errors_are_evu_errors(self):
        assert isinstance(TransportError("x"), EvuError)
        assert isinstance(DecodeError("x"), EvuError)


class TestValidators:
    """Tests for input validators."""

    def test_environment_names_kept_as_given(self):
        assert validate_environment_names(["QA", "Dev", "QA"]) == ["QA", "Dev", "QA"]

    @pytest.mark.parametrize("names", [None, []])
    def test_environment_names_required(self, names):
        with pytest.raises(ConfigurationError):
            validate_environment_names(names)

    def test_blank_environment_names_kept(self):
        """Test blank names pass through to be reported as unmatched."""
        assert validate_environment_names(["Dev", "", "  "]) == ["Dev", "", "  "]

    def test_api_token(self):
        assert validate_api_token("  abc ") == "abc"

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_api_token_required(self, token):
        with pytest.raises(ConfigurationError):
            validate_api_token(token)


class TestLogging:
    """Tests for logging helpers."""

    @pytest.mark.parametrize(
        "name,level",
        [
            ("debug", logging.DEBUG),
            ("Info", logging.INFO),
            ("warn", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("fatal", logging.CRITICAL),
        ],
    )
    def test_resolve_level(self, name, level):
        assert resolve_level(name) == level

    def test_off_silences_everything(self):
        assert resolve_level("off") > logging.CRITICAL

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            resolve_level("loud")

    def test_configure_logging(self):
        configure_logging(level="info")
        logger = logging.getLogger("appveyor_evu")

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_get_logger_prefix(self):
        assert get_logger("core.matrix").name == "appveyor_evu.core.matrix"
        assert get_logger("appveyor_evu.api").name == "appveyor_evu.api"

    def test_logger_with_context(self):
        adapter = get_logger_with_context("session", run="abc")
        msg, kwargs = adapter.process("hello", {})
        assert kwargs["extra"]["extra_fields"] == {"run": "abc"}
