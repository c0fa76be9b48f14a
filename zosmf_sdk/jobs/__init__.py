"""z/OSMF jobs API: models, clients and the job monitor."""

from zosmf_sdk.jobs.job_get import JobGetClient
from zosmf_sdk.jobs.job_modify import JobCancelClient, JobDeleteClient
from zosmf_sdk.jobs.job_submit import JobSubmitClient
from zosmf_sdk.jobs.models import (
    GetJobParams,
    Job,
    JobFile,
    JobStepData,
    MonitorParams,
    StatusWaitResult,
    StepDataOutcome,
)
from zosmf_sdk.jobs.monitor import JobMonitor
from zosmf_sdk.jobs.status import JOB_STATUS_ORDER, JobStatus, order_index_of_status

__all__ = [
    "JobGetClient",
    "JobSubmitClient",
    "JobDeleteClient",
    "JobCancelClient",
    "JobMonitor",
    "GetJobParams",
    "Job",
    "JobFile",
    "JobStepData",
    "MonitorParams",
    "StatusWaitResult",
    "StepDataOutcome",
    "JobStatus",
    "JOB_STATUS_ORDER",
    "order_index_of_status",
]
