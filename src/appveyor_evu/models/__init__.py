"""Data models for appveyor-evu.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from appveyor_evu.models.common import ErrorInfo
from appveyor_evu.models.environment import (
    EnvironmentDetail,
    EnvironmentSummary,
    VariableSetting,
)
from appveyor_evu.models.matrix import (
    CORNER_CELL,
    ComparisonReport,
    MatrixRow,
    SelectionResult,
    VariableMatrix,
)

__all__ = [
    # Common
    "ErrorInfo",
    # Environment
    "EnvironmentDetail",
    "EnvironmentSummary",
    "VariableSetting",
    # Matrix
    "CORNER_CELL",
    "ComparisonReport",
    "MatrixRow",
    "SelectionResult",
    "VariableMatrix",
]
