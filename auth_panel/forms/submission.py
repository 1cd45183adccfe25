"""The remote side of a form submission.

The controller only knows the Submitter protocol. The shipped
implementation is a fixed-delay stub that always succeeds; a real backend
plugs in by implementing `run()` and may fail or raise.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from ..config import SUBMIT_DELAY_SECONDS
from .models import Buffer, FormMode

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something went wrong. Please try again."


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    reason: str = ""

    @classmethod
    def success(cls) -> "SubmissionResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str = GENERIC_FAILURE) -> "SubmissionResult":
        return cls(ok=False, reason=reason or GENERIC_FAILURE)


class Submitter(Protocol):
    """Anything that can carry out a validated form submission."""

    async def run(self, mode: FormMode, buffer: Buffer) -> SubmissionResult:
        """Perform the operation for `mode` and report the outcome."""
        ...


class DelayedSuccessSubmitter:
    """Stub backend: waits `delay` seconds, then reports success.

    The wait cannot be cancelled from outside; the controller decides
    whether a result is still wanted when it arrives.
    """

    def __init__(self, delay: float = SUBMIT_DELAY_SECONDS):
        self.delay = delay

    async def run(self, mode: FormMode, buffer: Buffer) -> SubmissionResult:
        await asyncio.sleep(self.delay)
        return SubmissionResult.success()


async def safe_run(submitter: Submitter, mode: FormMode, buffer: Buffer) -> SubmissionResult:
    """Run `submitter`, turning an exception into a failed result.

    A backend error must never take the panel down; the user gets the
    generic message and can submit again.
    """
    try:
        return await submitter.run(mode, buffer)
    except Exception:
        logger.exception("Submitter raised during %s submission", mode.value)
        return SubmissionResult.failure()
