"""Unit tests for ComparisonSession."""

import logging
from pathlib import Path

import pytest

from appveyor_evu.api.base import AuthorizationError, TransportError
from appveyor_evu.core.session import ComparisonSession
from appveyor_evu.utils.errors import OutputWriteError


class TestComparisonSession:
    """Tests for ComparisonSession."""

    def test_compare_writes_rows(self, fake_appveyor, recording_writer, tmp_path):
        """Test the full flow hands the expected grid to the writer."""
        session = ComparisonSession(fake_appveyor, fake_appveyor, recording_writer)
        output = tmp_path / "out.csv"

        report = session.compare("tok", ["QA", "Dev", "Missing"], output)

        assert report.selection.matched_names == ["Dev", "QA"]
        assert report.selection.unmatched == ["Missing"]
        assert report.output_path == output
        assert report.written
        assert recording_writer.writes == [
            (
                output,
                [
                    [" ", "Dev", "QA"],
                    ["BAR", "", "x"],
                    ["FOO", "1", "2"],
                ],
            )
        ]

    def test_details_fetched_in_matched_order(self, fake_appveyor, recording_writer, tmp_path):
        """Test one detail call per matched environment, in directory order."""
        session = ComparisonSession(fake_appveyor, fake_appveyor, recording_writer)

        session.compare("tok", ["QA", "Dev"], tmp_path / "out.csv")

        assert fake_appveyor.calls == [
            ("list", "tok"),
            ("detail", "tok", "1"),
            ("detail", "tok", "3"),
        ]

    def test_zero_matches_still_writes(self, fake_appveyor, recording_writer, tmp_path):
        """Test a run with no matches writes only the corner header."""
        session = ComparisonSession(fake_appveyor, fake_appveyor, recording_writer)

        report = session.compare("tok", ["Nope"], tmp_path / "out.csv")

        assert report.selection.matched == []
        assert report.matrix.column_headers == []
        assert report.matrix.rows == []
        assert recording_writer.writes[0][1] == [[" "]]
        assert [c[0] for c in fake_appveyor.calls] == ["list"]

    def test_mismatch_logged_as_warning(self, fake_appveyor, recording_writer, tmp_path, caplog):
        """Test unmatched names produce a warning naming them."""
        session = ComparisonSession(fake_appveyor, fake_appveyor, recording_writer)

        with caplog.at_level(logging.WARNING, logger="appveyor_evu"):
            session.compare("tok", ["Dev", "Missing"], tmp_path / "out.csv")

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert '"Missing"' in warnings[0].getMessage()

    def test_build_report_does_not_write(self, fake_appveyor, recording_writer):
        """Test build_report stops before the writer."""
        session = ComparisonSession(fake_appveyor, fake_appveyor, recording_writer)

        report = session.build_report("tok", ["Prod"])

        assert recording_writer.writes == []
        assert report.output_path is None
        assert report.matrix.column_headers == ["Prod"]
        assert report.matrix.variable_names == ["FOO", "SECRET"]

    def test_compare_requires_writer(self, fake_appveyor, tmp_path):
        session = ComparisonSession(fake_appveyor, fake_appveyor)

        with pytest.raises(ValueError):
            session.compare("tok", ["Dev"], tmp_path / "out.csv")

    def test_directory_error_propagates(self, recording_writer, tmp_path, make_appveyor):
        """Test directory failures reach the caller unchanged."""
        error = AuthorizationError("rejected", status_code=401)

        class FailingDirectory:
            def list_environments(self, credential):
                raise error

        session = ComparisonSession(FailingDirectory(), make_appveyor([]), recording_writer)

        with pytest.raises(AuthorizationError) as exc:
            session.compare("tok", ["Dev"], tmp_path / "out.csv")

        assert exc.value is error
        assert recording_writer.writes == []

    def test_detail_error_aborts_run(self, fake_appveyor, recording_writer, tmp_path):
        """Test a failing detail fetch writes nothing and stops further fetches."""
        calls = []

        class FailingDetails:
            def get_environment_detail(self, credential, environment_id):
                calls.append(environment_id)
                raise TransportError("unreachable")

        session = ComparisonSession(fake_appveyor, FailingDetails(), recording_writer)

        with pytest.raises(TransportError):
            session.compare("tok", ["Dev", "QA"], tmp_path / "out.csv")

        assert calls == ["1"]
        assert recording_writer.writes == []

    def test_writer_error_propagates(self, fake_appveyor, tmp_path):
        """Test writer failures reach the caller."""

        class FailingWriter:
            def write(self, destination, rows):
                raise OutputWriteError("disk full", path=str(destination))

        session = ComparisonSession(fake_appveyor, fake_appveyor, FailingWriter())

        with pytest.raises(OutputWriteError):
            session.compare("tok", ["Dev"], Path(tmp_path / "out.csv"))
