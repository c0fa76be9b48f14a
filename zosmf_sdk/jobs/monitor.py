"""
Job monitor

Waits for a job to enter a status or to write a message to its output by
polling the z/OSMF jobs REST endpoints.

The natural order of job statuses is INPUT, ACTIVE, OUTPUT. When the
requested status is earlier in that order than the job's current status,
the status wait returns immediately with the current status, since the job
will never enter the requested status again.

Failure policy differs between the two waits: a status wait that uses up
its attempts raises DesiredStatusNotReachedError, while a message wait that
never sees its message returns False. Transport errors and missing jobs
abort either wait immediately and are never retried.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.api.exceptions import APIError
from zosmf_sdk.config.settings import get_settings
from zosmf_sdk.jobs.job_get import JobGetClient, job_identity
from zosmf_sdk.jobs.models import (
    CheckJobStatus,
    Job,
    MonitorParams,
    StatusWaitResult,
    StepDataOutcome,
)
from zosmf_sdk.jobs.status import JobStatus, order_index_of_status
from zosmf_sdk.shared.exceptions import (
    DesiredStatusNotReachedError,
    InvalidParameterError,
    JobNotFoundError,
    JobStatusOrderError,
    MonitorCancelledError,
    ZosmfSDKError,
)

INVALID_STATUS_MSG = "Invalid status when checking for status ordering."
ATTEMPTS_EXHAUSTED_MSG = "Desired status not seen. The number of maximum attempts reached."


def message_in_output(lines: Sequence[str], message: str, line_limit: int) -> bool:
    """True if message occurs in one of the last line_limit lines."""
    start = max(len(lines) - line_limit, 0)
    for line in lines[start:]:
        if message in line:
            return True
    return False


def _check_identity(job_name: Optional[str], job_id: Optional[str]) -> None:
    if not job_name:
        raise InvalidParameterError("job name not specified")
    if not job_id:
        raise InvalidParameterError("job id not specified")


class JobMonitor:
    """Poll a job until it reaches a status or shows a message.

    Args:
        connection: z/OSMF connection (not needed when job_get is given)
        attempts: Default number of polls (JOB_MONITOR_ATTEMPTS, 1000)
        watch_delay: Default delay between polls in milliseconds
            (JOB_MONITOR_WATCH_DELAY_MS, 3000)
        line_limit: Default number of trailing output lines to scan
            (JOB_MONITOR_LINE_LIMIT, 1000)
        job_get: Job query client to poll with

    Usage:
        ```python
        with JobMonitor(connection) as monitor:
            result = monitor.wait_for_output_status("MYJOB", "JOB00123")
            print(result.job.retcode)
        ```
    """

    def __init__(
        self,
        connection: ZOSConnection | None = None,
        attempts: int | None = None,
        watch_delay: int | None = None,
        line_limit: int | None = None,
        job_get: JobGetClient | None = None,
    ) -> None:
        settings = get_settings()
        self.attempts = settings.job_monitor_attempts if attempts is None else attempts
        self.watch_delay = (
            settings.job_monitor_watch_delay_ms if watch_delay is None else watch_delay
        )
        self.line_limit = settings.job_monitor_line_limit if line_limit is None else line_limit
        if self.attempts < 1:
            raise InvalidParameterError("attempts must be at least 1")
        if self.watch_delay < 0:
            raise InvalidParameterError("watch delay must not be negative")
        if self.line_limit < 1:
            raise InvalidParameterError("line limit must be at least 1")

        self._owns_client = job_get is None
        if job_get is None:
            if connection is None:
                raise InvalidParameterError("connection is null")
            job_get = JobGetClient(connection)
        self.job_get = job_get

    def close(self) -> None:
        if self._owns_client:
            self.job_get.close()

    def __enter__(self) -> JobMonitor:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    # =========================================================================
    # Status wait
    # =========================================================================

    def wait_for_status(
        self,
        job_name: str,
        job_id: str,
        status: JobStatus | str = JobStatus.OUTPUT,
        *,
        attempts: int | None = None,
        watch_delay: int | None = None,
        step_data: bool = True,
        cancel_event: threading.Event | None = None,
    ) -> StatusWaitResult:
        """Wait for a job to reach status (or a later one).

        Args:
            job_name: Job name
            job_id: Job id
            status: Desired status (default OUTPUT)
            attempts: Number of polls (default: monitor default)
            watch_delay: Milliseconds between polls (default: monitor default)
            step_data: Fetch step-level detail once polling ends
            cancel_event: Setting it aborts the wait with MonitorCancelledError

        Returns:
            Result holding the last job snapshot

        Raises:
            InvalidParameterError: missing identity or unknown status
            JobStatusOrderError: the job reports a status outside the known order
            DesiredStatusNotReachedError: attempts used up
        """
        _check_identity(job_name, job_id)
        params = self._build_params(
            job_name=job_name,
            job_id=job_id,
            status=JobStatus.parse(status),
            attempts=attempts,
            watch_delay=watch_delay,
            step_data=step_data,
        )
        return self.wait_status_common(params, cancel_event=cancel_event)

    def wait_for_status_by_job(
        self,
        job: Job,
        status: JobStatus | str = JobStatus.OUTPUT,
        **kwargs: Any,
    ) -> StatusWaitResult:
        job_name, job_id = job_identity(job)
        return self.wait_for_status(job_name, job_id, status, **kwargs)

    def wait_for_output_status(self, job_name: str, job_id: str, **kwargs: Any) -> StatusWaitResult:
        return self.wait_for_status(job_name, job_id, JobStatus.OUTPUT, **kwargs)

    def wait_for_output_status_by_job(self, job: Job, **kwargs: Any) -> StatusWaitResult:
        return self.wait_for_status_by_job(job, JobStatus.OUTPUT, **kwargs)

    def wait_status_common(
        self,
        params: MonitorParams,
        cancel_event: threading.Event | None = None,
    ) -> StatusWaitResult:
        """Status wait driven by a MonitorParams (status defaults to OUTPUT)."""
        if params is None:
            raise InvalidParameterError("params is null")
        _check_identity(params.job_name, params.job_id)
        if params.message is not None:
            raise InvalidParameterError("params ask for a message, use wait_message_common")
        resolved = params.with_defaults(self.attempts, self.watch_delay, self.line_limit)
        return self._poll_by_status(resolved, cancel_event)

    def _poll_by_status(
        self, params: MonitorParams, cancel_event: threading.Event | None
    ) -> StatusWaitResult:
        assert params.status is not None and params.attempts is not None
        status_name = str(params.status)
        logger.info(f'Waiting for status "{status_name}"')

        check: CheckJobStatus | None = None
        num_of_attempts = 0
        while num_of_attempts < params.attempts:
            self._raise_if_cancelled(cancel_event)
            num_of_attempts += 1
            check = self._check_status(params)
            if check.found:
                break
            if num_of_attempts < params.attempts:
                self._wait(params.watch_delay or 0, cancel_event)
                logger.info(f'Waiting for status "{status_name}"')

        assert check is not None
        result = self._attach_step_data(params, check.job, num_of_attempts)
        if not check.found:
            raise DesiredStatusNotReachedError(
                ATTEMPTS_EXHAUSTED_MSG, attempts=num_of_attempts, result=result
            )
        return result

    def _check_status(self, params: MonitorParams) -> CheckJobStatus:
        """One status poll.

        An exact match always wins; otherwise a job that is already past the
        desired status counts as found with its current status. A job
        document without a status compares equal to OUTPUT.
        """
        desired = str(params.status)
        job = self.job_get.get_status(params.job_name, params.job_id)
        current = job.status

        if (current or JobStatus.OUTPUT.value) == desired:
            return CheckJobStatus(found=True, job=job)

        desired_index = order_index_of_status(desired)
        if desired_index == -1:
            raise JobStatusOrderError(f"{INVALID_STATUS_MSG} Desired status: {desired!r}")

        if current is None:
            raise JobStatusOrderError(f"{INVALID_STATUS_MSG} Job status not specified")
        current_index = order_index_of_status(current)
        if current_index == -1:
            raise JobStatusOrderError(f"{INVALID_STATUS_MSG} Job status: {current!r}")

        if current_index > desired_index:
            logger.info(
                f"{params.job_name}({params.job_id}) is {current}, already past {desired}"
            )
            return CheckJobStatus(found=True, job=job)

        return CheckJobStatus(found=False, job=job)

    def _attach_step_data(
        self, params: MonitorParams, job: Job, num_of_attempts: int
    ) -> StatusWaitResult:
        if not params.step_data:
            return StatusWaitResult(
                job=job, attempts=num_of_attempts, step_data=StepDataOutcome.SKIPPED
            )
        try:
            detailed = self.job_get.get_status(params.job_name, params.job_id, step_data=True)
        except (APIError, ZosmfSDKError, ValidationError) as e:
            # e.g. a JCL error leaves the job without steps
            logger.warning(f"Step data unavailable for {params.job_name}({params.job_id}): {e}")
            return StatusWaitResult(
                job=job,
                attempts=num_of_attempts,
                step_data=StepDataOutcome.UNAVAILABLE,
                step_data_error=str(e),
            )
        return StatusWaitResult(
            job=job.with_step_data(detailed.step_data),
            attempts=num_of_attempts,
            step_data=StepDataOutcome.ATTACHED,
        )

    # =========================================================================
    # Message wait
    # =========================================================================

    def wait_for_message(
        self,
        job_name: str,
        job_id: str,
        message: str,
        *,
        attempts: int | None = None,
        watch_delay: int | None = None,
        line_limit: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> bool:
        """Wait for message to show up in the job output.

        Only the last line_limit lines of the first spool file are scanned.
        Returns False when the job stops running without the message or when
        the attempts are used up.
        """
        _check_identity(job_name, job_id)
        if not message:
            raise InvalidParameterError("message not specified")
        params = self._build_params(
            job_name=job_name,
            job_id=job_id,
            message=message,
            attempts=attempts,
            watch_delay=watch_delay,
            line_limit=line_limit,
        )
        return self.wait_message_common(params, cancel_event=cancel_event)

    def wait_for_message_by_job(self, job: Job, message: str, **kwargs: Any) -> bool:
        job_name, job_id = job_identity(job)
        return self.wait_for_message(job_name, job_id, message, **kwargs)

    def wait_message_common(
        self,
        params: MonitorParams,
        cancel_event: threading.Event | None = None,
    ) -> bool:
        """Message wait driven by a MonitorParams."""
        if params is None:
            raise InvalidParameterError("params is null")
        _check_identity(params.job_name, params.job_id)
        if not params.message:
            raise InvalidParameterError("message not specified")
        resolved = params.with_defaults(self.attempts, self.watch_delay, self.line_limit)
        return self._poll_by_message(resolved, cancel_event)

    def _poll_by_message(
        self, params: MonitorParams, cancel_event: threading.Event | None
    ) -> bool:
        assert params.attempts is not None
        logger.info(f'Waiting for message "{params.message}"')

        for num_of_attempts in range(1, params.attempts + 1):
            self._raise_if_cancelled(cancel_event)
            if self._check_message(params):
                return True
            if num_of_attempts == params.attempts:
                break
            if not self.is_running(params.job_name, params.job_id):
                logger.info(
                    f"{params.job_name}({params.job_id}) is not running, "
                    f'message "{params.message}" not found'
                )
                return False
            self._wait(params.watch_delay or 0, cancel_event)
            logger.info(f'Waiting for message "{params.message}"')

        return False

    def _check_message(self, params: MonitorParams) -> bool:
        assert params.message is not None and params.line_limit is not None
        jobs = self.job_get.get_jobs_filtered(params.job_id, params.job_name)
        if not jobs:
            raise JobNotFoundError(f"job {params.job_name}({params.job_id}) does not exist")
        files = self.job_get.get_spool_files_by_job(jobs[0])
        if not files:
            logger.debug(f"{params.job_name}({params.job_id}) has no spool files yet")
            return False
        output = self.job_get.get_spool_content(files[0]).split("\n")
        return message_in_output(output, params.message, params.line_limit)

    # =========================================================================
    # Running check
    # =========================================================================

    def is_running(self, job_name: str, job_id: str) -> bool:
        """True unless the job is in INPUT or OUTPUT status."""
        _check_identity(job_name, job_id)
        status = self.job_get.get_status_value(job_name, job_id)
        return status not in (JobStatus.INPUT.value, JobStatus.OUTPUT.value)

    def is_running_by_job(self, job: Job) -> bool:
        job_name, job_id = job_identity(job)
        return self.is_running(job_name, job_id)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _build_params(self, **kwargs: Any) -> MonitorParams:
        try:
            return MonitorParams(**kwargs)
        except ValidationError as e:
            raise InvalidParameterError(str(e)) from e

    @staticmethod
    def _raise_if_cancelled(cancel_event: threading.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise MonitorCancelledError("job wait cancelled")

    @staticmethod
    def _wait(watch_delay: int, cancel_event: threading.Event | None) -> None:
        seconds = watch_delay / 1000
        if cancel_event is None:
            if seconds > 0:
                time.sleep(seconds)
            return
        if cancel_event.wait(seconds):
            raise MonitorCancelledError("job wait cancelled")
