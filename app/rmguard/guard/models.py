"""Decision and result models for guarded removal.

This module defines the values exchanged between the deletion guard,
the remover and the gently_rm entry point.
"""

from dataclasses import dataclass, field
from enum import Enum


class SkipReason(str, Enum):
    """Why the guard decided not to remove anything.

    Attributes:
        NOT_INSTALLED_BY_PARENT: The target resolves into another managed
            root and was not installed by the requested parent.
        VANISHED: The target disappeared before it could be verified.
    """

    NOT_INSTALLED_BY_PARENT = "not_installed_by_parent"
    VANISHED = "vanished"


class RmOutcome(str, Enum):
    """Overall outcome of a gently_rm call."""

    REMOVED = "removed"
    NOOP = "noop"
    DRY_RUN = "dry_run"


@dataclass(frozen=True, slots=True)
class RemovalInstruction:
    """Request for the remover to delete a target.

    Attributes:
        target: Absolute path to remove.
        base: Boundary directory; empty ancestors are pruned up to but
            excluding it. None disables pruning.
        purge: Remove recursively regardless of contents.
    """

    target: str
    base: str | None = None
    purge: bool = False


@dataclass(frozen=True, slots=True)
class Skip:
    """Decision to leave a target alone without failing.

    Attributes:
        target: Absolute path that was left in place.
        reason: Why nothing is removed.
    """

    target: str
    reason: SkipReason


Decision = RemovalInstruction | Skip


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """What the remover actually did for one target.

    Attributes:
        path: Absolute path that was operated on.
        removed: Whether the target itself was deleted.
        pruned: Empty ancestor directories removed, innermost first.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    removed: bool
    pruned: tuple[str, ...] = field(default_factory=tuple)
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class GentlyRmResult:
    """Result of a gently_rm call.

    Attributes:
        target: Absolute path that was requested for removal.
        outcome: Overall outcome.
        instruction: Removal instruction issued by the guard, if any.
        skip: Skip decision issued by the guard, if any.
        removal: Remover result, if the remover ran.
    """

    target: str
    outcome: RmOutcome
    instruction: RemovalInstruction | None = None
    skip: Skip | None = None
    removal: RemovalResult | None = None

    @property
    def removed(self) -> bool:
        """Check if the target was actually deleted."""
        return self.outcome == RmOutcome.REMOVED
