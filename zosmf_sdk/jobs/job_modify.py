"""Clients for cancelling and deleting z/OS jobs."""

from __future__ import annotations

from loguru import logger

from zosmf_sdk.api.client import BaseAPIClient
from zosmf_sdk.api.response import ZosmfResponse
from zosmf_sdk.jobs import constants
from zosmf_sdk.jobs.job_get import job_identity, job_path
from zosmf_sdk.jobs.models import Job, ModifyJobParams
from zosmf_sdk.shared.exceptions import InvalidParameterError


def check_modify_params(params: ModifyJobParams) -> None:
    if params is None:
        raise InvalidParameterError("params is null")
    if not params.job_name:
        raise InvalidParameterError("job name not specified")
    if not params.job_id:
        raise InvalidParameterError("job id not specified")
    if params.version not in constants.MODIFY_VERSIONS:
        raise InvalidParameterError(f"invalid version specified: {params.version}")


def _log_version(version: str) -> None:
    if version == "1.0":
        logger.debug("version 1.0 specified, request is processed asynchronously")
    else:
        logger.debug("version 2.0 specified, request is processed synchronously")


class JobDeleteClient(BaseAPIClient):
    """Delete (purge) jobs through DELETE /zosmf/restjobs/jobs/{jobname}/{jobid}.

    With version 2.0 the response body holds the job document that was
    purged; with version 1.0 only the status code is meaningful. The body
    is left for the caller to read.
    """

    def delete(
        self, job_name: str, job_id: str, version: str = constants.DEFAULT_MODIFY_VERSION
    ) -> ZosmfResponse:
        return self.delete_common(
            ModifyJobParams(job_name=job_name, job_id=job_id, version=version)
        )

    def delete_by_job(
        self, job: Job, version: str = constants.DEFAULT_MODIFY_VERSION
    ) -> ZosmfResponse:
        job_name, job_id = job_identity(job)
        return self.delete(job_name, job_id, version)

    def delete_common(self, params: ModifyJobParams) -> ZosmfResponse:
        check_modify_params(params)
        _log_version(params.version)
        response = self._delete(
            job_path(params.job_name, params.job_id),
            headers={constants.X_IBM_JOB_MODIFY_VERSION: params.version},
        )
        logger.info(f"Delete requested for {params.job_name}({params.job_id})")
        return response


class JobCancelClient(BaseAPIClient):
    """Cancel jobs through PUT /zosmf/restjobs/jobs/{jobname}/{jobid}."""

    def cancel(
        self, job_name: str, job_id: str, version: str = constants.DEFAULT_MODIFY_VERSION
    ) -> ZosmfResponse:
        return self.cancel_common(
            ModifyJobParams(job_name=job_name, job_id=job_id, version=version)
        )

    def cancel_by_job(
        self, job: Job, version: str = constants.DEFAULT_MODIFY_VERSION
    ) -> ZosmfResponse:
        job_name, job_id = job_identity(job)
        return self.cancel(job_name, job_id, version)

    def cancel_common(self, params: ModifyJobParams) -> ZosmfResponse:
        check_modify_params(params)
        _log_version(params.version)
        response = self._put_raw(
            job_path(params.job_name, params.job_id),
            json={"request": "cancel", "version": params.version},
        )
        logger.info(f"Cancel requested for {params.job_name}({params.job_id})")
        return response
