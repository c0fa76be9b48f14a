"""Client for retrieving z/OSMF job documents and spool output."""

from __future__ import annotations

from typing import Any

from loguru import logger

from zosmf_sdk.api.client import BaseAPIClient
from zosmf_sdk.api.encoding import encode_uri_component
from zosmf_sdk.api.exceptions import APIResponseParseError
from zosmf_sdk.jobs import constants
from zosmf_sdk.jobs.models import CommonJobParams, GetJobParams, Job, JobFile
from zosmf_sdk.shared.exceptions import InvalidParameterError


def job_path(job_name: str, job_id: str) -> str:
    """Resource path of one job."""
    if not job_name:
        raise InvalidParameterError("job name not specified")
    if not job_id:
        raise InvalidParameterError("job id not specified")
    return (
        f"{constants.RESOURCE}{constants.FILE_DELIM}{encode_uri_component(job_name)}"
        f"{constants.FILE_DELIM}{encode_uri_component(job_id)}"
    )


def job_identity(job: Job | None) -> tuple[str, str]:
    """(job_name, job_id) of a job document.

    Raises:
        InvalidParameterError: when the document lacks a name or id
    """
    if job is None:
        raise InvalidParameterError("job is null")
    if not job.job_name:
        raise InvalidParameterError("job name not specified")
    if not job.job_id:
        raise InvalidParameterError("job id not specified")
    return job.job_name, job.job_id


class JobGetClient(BaseAPIClient):
    """Read access to the z/OSMF jobs resource.

    Endpoints used:
        - GET /zosmf/restjobs/jobs - Job list filtered by owner/prefix/jobid
        - GET /zosmf/restjobs/jobs/{jobname}/{jobid} - Job status
        - GET /zosmf/restjobs/jobs/{jobname}/{jobid}/files - Spool files
        - GET /zosmf/restjobs/jobs/{jobname}/{jobid}/files/{id}/records - Spool content

    Usage:
        ```python
        with JobGetClient(connection) as client:
            job = client.get_status("MYJOB", "JOB00123")
            files = client.get_spool_files_by_job(job)
            text = client.get_spool_content(files[0])
        ```
    """

    # =========================================================================
    # Job list
    # =========================================================================

    def get_jobs(self, params: GetJobParams | None = None) -> list[Job]:
        """List jobs matching a filter.

        Args:
            params: owner/prefix/max-jobs/jobid filter (default: all owners and prefixes)

        Returns:
            Job documents, possibly empty
        """
        params = params or GetJobParams()
        data = self._get(constants.RESOURCE, params=params.to_query())
        if not isinstance(data, list):
            return []
        return [Job.model_validate(item) for item in data]

    def get_jobs_filtered(self, job_id: str, job_name: str) -> list[Job]:
        """List jobs by job id and job name prefix for any owner."""
        if not job_id:
            raise InvalidParameterError("job id not specified")
        if not job_name:
            raise InvalidParameterError("job name not specified")
        return self.get_jobs(GetJobParams(owner="*", prefix=job_name, job_id=job_id))

    def get_jobs_by_owner(self, owner: str) -> list[Job]:
        if not owner:
            raise InvalidParameterError("owner not specified")
        return self.get_jobs(GetJobParams(owner=owner))

    def get_jobs_by_prefix(self, prefix: str) -> list[Job]:
        if not prefix:
            raise InvalidParameterError("prefix not specified")
        return self.get_jobs(GetJobParams(prefix=prefix))

    # =========================================================================
    # Job status
    # =========================================================================

    def get_status(self, job_name: str, job_id: str, step_data: bool = False) -> Job:
        """Get the current job document.

        Args:
            job_name: Job name (e.g., "MYJOB")
            job_id: Job id (e.g., "JOB00123")
            step_data: Also return step-level detail

        Raises:
            APINotFoundError: when the job does not exist
        """
        params: dict[str, Any] | None = {constants.STEP_DATA: "Y"} if step_data else None
        data = self._get(job_path(job_name, job_id), params=params, response_model=Job)
        if not isinstance(data, Job):
            raise APIResponseParseError(f"unexpected job document for {job_name}({job_id})")
        return data

    def get_status_common(self, params: CommonJobParams) -> Job:
        return self.get_status(params.job_name, params.job_id, step_data=params.step_data)

    def get_status_by_job(self, job: Job, step_data: bool = False) -> Job:
        job_name, job_id = job_identity(job)
        return self.get_status(job_name, job_id, step_data=step_data)

    def get_status_value(self, job_name: str, job_id: str) -> str | None:
        """Only the status string of a job."""
        return self.get_status(job_name, job_id).status

    # =========================================================================
    # Spool
    # =========================================================================

    def get_spool_files(self, job_name: str, job_id: str) -> list[JobFile]:
        """List the spool files of a job."""
        data = self._get(job_path(job_name, job_id) + constants.RESOURCE_SPOOL_FILES)
        if not isinstance(data, list):
            return []
        return [JobFile.model_validate(item) for item in data]

    def get_spool_files_by_job(self, job: Job) -> list[JobFile]:
        job_name, job_id = job_identity(job)
        return self.get_spool_files(job_name, job_id)

    def get_spool_content(self, job_file: JobFile) -> str:
        """Read the records of one spool file as text."""
        if job_file is None:
            raise InvalidParameterError("job file is null")
        if not job_file.job_name or not job_file.job_id:
            raise InvalidParameterError("job file lacks job name or job id")
        path = (
            f"{job_path(job_file.job_name, job_file.job_id)}"
            f"{constants.RESOURCE_SPOOL_FILES}{constants.FILE_DELIM}{job_file.id}"
            f"{constants.RESOURCE_SPOOL_CONTENT}"
        )
        logger.debug(f"Reading spool file {job_file.ddname} ({job_file.id})")
        return self._get_text(path)

    def get_jcl(self, job_name: str, job_id: str) -> str:
        """Read the JCL a job was submitted with."""
        return self._get_text(job_path(job_name, job_id) + constants.RESOURCE_JCL_CONTENT)

    def get_jcl_by_job(self, job: Job) -> str:
        job_name, job_id = job_identity(job)
        return self.get_jcl(job_name, job_id)
