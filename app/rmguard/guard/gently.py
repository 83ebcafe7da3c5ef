"""Guarded removal entry points.

gently_rm asks the deletion guard for a decision and hands removal
instructions to the remover. Refusals propagate as exceptions; skips
and already-missing targets are reported as no-ops.
"""

import asyncio
import logging

from rmguard.guard.guard import DeletionGuard
from rmguard.guard.models import GentlyRmResult, RmOutcome, Skip
from rmguard.guard.remover import Remover

logger = logging.getLogger(__name__)


def gently_rm(
    target: str,
    gently: bool = False,
    base: str | None = None,
    *,
    guard: DeletionGuard,
    remover: Remover,
) -> GentlyRmResult:
    """Remove a path if the guard allows it.

    Args:
        target: Path to remove, absolute or relative to the install prefix.
        gently: Verify the target belongs to the managed tree first.
        base: Boundary directory for pruning and verification.
        guard: Guard that decides what may be removed.
        remover: Remover that carries out removal instructions.

    Returns:
        GentlyRmResult describing the outcome.

    Raises:
        ProtectedPathError: If the target is a managed root.
        ClobberError: If the target cannot be proven safe to delete.
        RemovalError: If the target is not a directory, file or link.
        OSError: For unexpected I/O failures.
    """
    decision = guard.decide(target, gently, base)

    if isinstance(decision, Skip):
        logger.info("Leaving %s in place (%s)", decision.target, decision.reason.value)
        return GentlyRmResult(target=decision.target, outcome=RmOutcome.NOOP, skip=decision)

    removal = remover.apply(decision)

    if removal.dry_run:
        outcome = RmOutcome.DRY_RUN
    elif removal.removed:
        outcome = RmOutcome.REMOVED
    else:
        outcome = RmOutcome.NOOP

    return GentlyRmResult(
        target=decision.target,
        outcome=outcome,
        instruction=decision,
        removal=removal,
    )


async def gently_rm_async(
    target: str,
    gently: bool = False,
    base: str | None = None,
    *,
    guard: DeletionGuard,
    remover: Remover,
) -> GentlyRmResult:
    """Run gently_rm in a worker thread.

    The decision steps still run sequentially inside one call; only the
    blocking filesystem work moves off the event loop.
    """
    return await asyncio.to_thread(
        gently_rm,
        target,
        gently,
        base,
        guard=guard,
        remover=remover,
    )
