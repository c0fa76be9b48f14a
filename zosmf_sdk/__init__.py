"""Client SDK for the IBM z/OSMF REST jobs interface.

Clients:
    - JobGetClient: job list, status and spool output
    - JobSubmitClient: submit JCL from a data set or as text
    - JobDeleteClient / JobCancelClient: purge or cancel jobs
    - JobMonitor: wait for a job status or for a message in the job output
"""

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.jobs.job_get import JobGetClient
from zosmf_sdk.jobs.job_modify import JobCancelClient, JobDeleteClient
from zosmf_sdk.jobs.job_submit import JobSubmitClient
from zosmf_sdk.jobs.monitor import JobMonitor
from zosmf_sdk.jobs.status import JobStatus

__version__ = "0.1.0"

__all__ = [
    "ZOSConnection",
    "JobGetClient",
    "JobSubmitClient",
    "JobDeleteClient",
    "JobCancelClient",
    "JobMonitor",
    "JobStatus",
]
