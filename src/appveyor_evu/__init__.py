"""appveyor-evu: compare environment variables across AppVeyor environments.

This package pulls deployment environments from the AppVeyor API, keeps the
ones you ask for and pivots their variables into a comparison matrix:

- **Selector**: match requested names against the environment directory
- **Matrix Builder**: one row per variable, one column per environment
- **Writers**: persist the matrix as CSV, TSV or Markdown

Usage:
    # Library API
    from appveyor_evu import AppVeyorClient, ComparisonSession, CSVWriter

    client = AppVeyorClient()
    session = ComparisonSession(client, client, CSVWriter())
    report = session.compare(token, ["Dev", "QA"], Path("compare.csv"))
    print(report.selection.unmatched)

    # Pure pivot
    from appveyor_evu import build_matrix
    matrix = build_matrix([dev_detail, qa_detail])

CLI:
    appveyor-evu compare --api-token <token> -e Dev -e QA -o compare.csv
    appveyor-evu environments --api-token <token>
"""

__version__ = "0.1.0"

# Core classes
from appveyor_evu.core.selector import select_environments
from appveyor_evu.core.matrix import MatrixBuilder, build_matrix
from appveyor_evu.core.session import ComparisonSession

# Models (commonly used)
from appveyor_evu.models.environment import EnvironmentDetail, EnvironmentSummary, VariableSetting
from appveyor_evu.models.matrix import ComparisonReport, MatrixRow, SelectionResult, VariableMatrix

# API clients
from appveyor_evu.api.appveyor import AppVeyorClient
from appveyor_evu.api.base import (
    ApiError,
    AuthorizationError,
    DecodeError,
    EnvironmentDetailSource,
    EnvironmentDirectory,
    TransportError,
)

# Writers
from appveyor_evu.renderers.base import OutputFormat, TabularWriter
from appveyor_evu.renderers.csv import CSVWriter

__all__ = [
    # Version
    "__version__",
    # Core
    "select_environments",
    "MatrixBuilder",
    "build_matrix",
    "ComparisonSession",
    # Models
    "EnvironmentDetail",
    "EnvironmentSummary",
    "VariableSetting",
    "ComparisonReport",
    "MatrixRow",
    "SelectionResult",
    "VariableMatrix",
    # API
    "AppVeyorClient",
    "ApiError",
    "AuthorizationError",
    "DecodeError",
    "EnvironmentDetailSource",
    "EnvironmentDirectory",
    "TransportError",
    # Writers
    "OutputFormat",
    "TabularWriter",
    "CSVWriter",
]
