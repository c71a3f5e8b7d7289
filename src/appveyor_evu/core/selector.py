"""Selection of requested environments from the environment directory."""

from __future__ import annotations

from collections.abc import Sequence

from appveyor_evu.models.environment import EnvironmentSummary
from appveyor_evu.models.matrix import SelectionResult


def select_environments(
    all_environments: Sequence[EnvironmentSummary],
    requested_names: Sequence[str],
) -> SelectionResult:
    """Match requested environment names against the directory listing.

    Names match on exact, case-sensitive equality. Matched environments keep
    the directory's order, which becomes the column order of the matrix.
    Unmatched names keep the caller's order and are not deduplicated.

    Mismatches are not errors: the result is returned even when nothing
    matched, and it is up to the caller to warn.

    Args:
        all_environments: Every environment the account can see
        requested_names: Environment names the caller asked for

    Returns:
        SelectionResult with matched environments and unmatched names
    """
    wanted = set(requested_names)
    matched = [env for env in all_environments if env.name in wanted]

    available = {env.name for env in all_environments}
    unmatched = [name for name in requested_names if name not in available]

    return SelectionResult(
        requested=list(requested_names),
        matched=matched,
        unmatched=unmatched,
    )


def describe_names(names: Sequence[str]) -> str:
    """Format names for log and console messages: "a", "b"."""
    return ", ".join(f'"{name}"' for name in names)
