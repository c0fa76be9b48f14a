"""Pydantic models for z/OSMF job documents and job API parameters."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from zosmf_sdk.jobs import constants
from zosmf_sdk.jobs.status import JobStatus


# =============================================================================
# Job documents
# =============================================================================


class JobStepData(BaseModel):
    """Step-level detail of a job (returned with ``step-data=Y``)."""

    step_number: Optional[int] = Field(default=None, alias="step-number")
    step_name: Optional[str] = Field(default=None, alias="step-name")
    proc_step_name: Optional[str] = Field(default=None, alias="proc-step-name")
    program_name: Optional[str] = Field(default=None, alias="program-name")
    completion: Optional[str] = None
    abend_reason_code: Optional[str] = Field(default=None, alias="abend-reason-code")
    active: Optional[bool] = None
    smfid: Optional[str] = None
    owner: Optional[str] = None
    path_name: Optional[str] = Field(default=None, alias="path-name")
    substep_number: Optional[int] = Field(default=None, alias="substep-number")
    selected_time: Optional[str] = Field(default=None, alias="selected-time")
    end_time: Optional[str] = Field(default=None, alias="end-time")

    model_config = {"populate_by_name": True}


class Job(BaseModel):
    """z/OSMF job document."""

    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_name: Optional[str] = Field(default=None, alias="jobname")
    subsystem: Optional[str] = None
    owner: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    job_class: Optional[str] = Field(default=None, alias="class")
    retcode: Optional[str] = None
    url: Optional[str] = None
    files_url: Optional[str] = Field(default=None, alias="files-url")
    job_correlator: Optional[str] = Field(default=None, alias="job-correlator")
    phase: Optional[int] = None
    phase_name: Optional[str] = Field(default=None, alias="phase-name")
    reason_not_running: Optional[str] = Field(default=None, alias="reason-not-running")
    step_data: list[JobStepData] = Field(default_factory=list, alias="step-data")

    model_config = {"populate_by_name": True}

    def with_step_data(self, step_data: list[JobStepData]) -> Job:
        """Copy of this job with step data attached."""
        return self.model_copy(update={"step_data": list(step_data)})


class JobFile(BaseModel):
    """Spool file handle of a job."""

    id: int
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_name: Optional[str] = Field(default=None, alias="jobname")
    ddname: Optional[str] = None
    stepname: Optional[str] = None
    procstep: Optional[str] = None
    file_class: Optional[str] = Field(default=None, alias="class")
    recfm: Optional[str] = None
    lrecl: Optional[int] = None
    byte_count: Optional[int] = Field(default=None, alias="byte-count")
    record_count: Optional[int] = Field(default=None, alias="record-count")
    records_url: Optional[str] = Field(default=None, alias="records-url")
    subsystem: Optional[str] = None
    job_correlator: Optional[str] = Field(default=None, alias="job-correlator")

    model_config = {"populate_by_name": True}


# =============================================================================
# Request parameters
# =============================================================================


class GetJobParams(BaseModel):
    """Filter for the job list query."""

    owner: Optional[str] = constants.DEFAULT_OWNER
    prefix: Optional[str] = constants.DEFAULT_PREFIX
    max_jobs: Optional[int] = Field(default=constants.DEFAULT_MAX_JOBS, ge=1)
    job_id: Optional[str] = None

    model_config = {"frozen": True}

    def to_query(self) -> dict[str, Any]:
        query: dict[str, Any] = {}
        if self.owner:
            query[constants.QUERY_OWNER] = self.owner
        if self.prefix:
            query[constants.QUERY_PREFIX] = self.prefix
        if self.max_jobs is not None:
            query[constants.QUERY_MAX_JOBS] = self.max_jobs
        if self.job_id:
            query[constants.QUERY_JOBID] = self.job_id
        return query


class CommonJobParams(BaseModel):
    """Identity of one job plus the step-data flag."""

    job_id: str
    job_name: str
    step_data: bool = False

    model_config = {"frozen": True}


class ModifyJobParams(BaseModel):
    """Identity and processing version for cancel/delete."""

    job_name: str
    job_id: str
    version: str = constants.DEFAULT_MODIFY_VERSION

    model_config = {"frozen": True}


class SubmitJobParams(BaseModel):
    """Submit JCL stored in a data set."""

    job_data_set: str
    jcl_symbols: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


class SubmitJclParams(BaseModel):
    """Submit JCL passed as text."""

    jcl: str
    internal_reader_recfm: str = constants.DEFAULT_INTRDR_RECFM
    internal_reader_lrecl: int = Field(default=constants.DEFAULT_INTRDR_LRECL, gt=0)
    jcl_symbols: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


# =============================================================================
# Monitor
# =============================================================================


class MonitorParams(BaseModel):
    """Polling configuration of one wait call.

    Exactly one polling mode applies: a desired ``status`` or a ``message``
    to find in the job output. Unset numeric values are filled from the
    monitor defaults by ``with_defaults`` before polling starts.
    """

    job_name: str = Field(min_length=1)
    job_id: str = Field(min_length=1)
    status: Optional[JobStatus] = None
    message: Optional[str] = None
    attempts: Optional[int] = Field(default=None, ge=1)
    watch_delay: Optional[int] = Field(default=None, ge=0)
    line_limit: Optional[int] = Field(default=None, ge=1)
    step_data: bool = True

    model_config = {"frozen": True}

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> Any:
        if value is None:
            return None
        return JobStatus.parse(value)

    @model_validator(mode="after")
    def _single_mode(self) -> MonitorParams:
        if self.status is not None and self.message is not None:
            raise ValueError("status and message are mutually exclusive")
        return self

    def with_defaults(
        self,
        attempts: int,
        watch_delay: int,
        line_limit: int,
    ) -> MonitorParams:
        """Copy with unset values back-filled."""
        update: dict[str, Any] = {}
        if self.attempts is None:
            update["attempts"] = attempts
        if self.watch_delay is None:
            update["watch_delay"] = watch_delay
        if self.line_limit is None:
            update["line_limit"] = line_limit
        if self.status is None and self.message is None:
            update["status"] = JobStatus.OUTPUT
        return self.model_copy(update=update) if update else self


class CheckJobStatus(BaseModel):
    """Outcome of one status poll."""

    found: bool
    job: Job


class StepDataOutcome(str, Enum):
    ATTACHED = "attached"
    UNAVAILABLE = "unavailable"
    SKIPPED = "skipped"


class StatusWaitResult(BaseModel):
    """Result of a status wait.

    ``job`` is the last snapshot seen. When the follow-up step-data query
    fails the snapshot is returned without steps, ``step_data`` is
    ``UNAVAILABLE`` and ``step_data_error`` holds the failure text.
    """

    job: Job
    attempts: int
    step_data: StepDataOutcome = StepDataOutcome.SKIPPED
    step_data_error: Optional[str] = None

    @property
    def status(self) -> Optional[str]:
        return self.job.status
