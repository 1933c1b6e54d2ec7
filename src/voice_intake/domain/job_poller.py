"""Polling of asynchronous jobs until they reach a terminal state."""

from collections.abc import Callable

from voice_intake.domain.models import (
    JobHandle,
    JobState,
    JobStatus,
    PollOutcome,
    PollResult,
)
from voice_intake.logging import setup_logging
from voice_intake.utils import pause

logger = setup_logging()


class JobPoller:
    """Turns an eventually-consistent job into a single final outcome."""

    def __init__(
        self,
        max_attempts: int = 60,
        interval_seconds: float = 1.5,
        sleep: Callable[[float], None] = pause,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._max_attempts = max_attempts
        self._interval_seconds = interval_seconds
        self._sleep = sleep

    def poll(
        self, handle: JobHandle, query: Callable[[JobHandle], JobStatus]
    ) -> PollResult:
        """
        Queries the job until it completes, fails, or the budget runs out.

        Every query consumes one attempt. A wait of one interval separates
        consecutive queries; no wait follows the last one. Exceptions raised
        by ``query`` are not caught here.

        Args:
            handle: The job to poll.
            query: Returns the current status of a job.

        Returns:
            PollResult with outcome ``succeeded``, ``failed`` or ``timed_out``.
        """
        last_state: str | None = None

        for attempt in range(1, self._max_attempts + 1):
            status = query(handle)
            last_state = status.state

            if status.is_terminal:
                return self._finish(handle, status, attempt)

            logger.info(
                "Waiting for job",
                extra={
                    "job_id": handle.job_id,
                    "status": status.state,
                    "attempt": attempt,
                    "max_attempts": self._max_attempts,
                },
            )
            if attempt < self._max_attempts:
                self._sleep(self._interval_seconds)

        logger.warning(
            "Job polling timed out",
            extra={"job_id": handle.job_id, "attempts": self._max_attempts},
        )
        return PollResult(
            outcome=PollOutcome.TIMED_OUT,
            attempts=self._max_attempts,
            last_state=last_state,
        )

    @staticmethod
    def _finish(handle: JobHandle, status: JobStatus, attempt: int) -> PollResult:
        if status.state == JobState.COMPLETED:
            logger.info(
                "Job completed",
                extra={"job_id": handle.job_id, "attempts": attempt},
            )
            return PollResult(
                outcome=PollOutcome.SUCCEEDED,
                attempts=attempt,
                result_location=status.result_location,
                last_state=status.state,
            )

        logger.warning(
            "Job failed",
            extra={
                "job_id": handle.job_id,
                "attempts": attempt,
                "reason": status.failure_reason,
            },
        )
        return PollResult(
            outcome=PollOutcome.FAILED,
            attempts=attempt,
            last_state=status.state,
            failure_reason=status.failure_reason,
        )
