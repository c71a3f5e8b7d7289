"""Core comparison logic for appveyor-evu.

This module provides the main library API for comparing environments.
"""

from appveyor_evu.core.selector import describe_names, select_environments
from appveyor_evu.core.matrix import MatrixBuilder, build_matrix
from appveyor_evu.core.session import ComparisonSession

__all__ = [
    "describe_names",
    "select_environments",
    "MatrixBuilder",
    "build_matrix",
    "ComparisonSession",
]
