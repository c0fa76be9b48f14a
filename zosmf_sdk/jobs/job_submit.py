"""Client for submitting z/OS jobs."""

from __future__ import annotations

from typing import Mapping, Optional

from loguru import logger

from zosmf_sdk.api.client import BaseAPIClient
from zosmf_sdk.api.exceptions import APIResponseParseError
from zosmf_sdk.jobs import constants
from zosmf_sdk.jobs.models import Job, SubmitJclParams, SubmitJobParams
from zosmf_sdk.shared.exceptions import InvalidParameterError


def jcl_symbol_headers(jcl_symbols: Optional[Mapping[str, str]]) -> dict[str, str]:
    """One ``X-IBM-JCL-Symbol-<NAME>`` header per JCL symbol."""
    headers: dict[str, str] = {}
    for name, value in (jcl_symbols or {}).items():
        if not name:
            raise InvalidParameterError("JCL symbol name not specified")
        headers[f"{constants.X_IBM_JCL_SYMBOL_PREFIX}{name}"] = str(value)
    return headers


class JobSubmitClient(BaseAPIClient):
    """Submit jobs through PUT /zosmf/restjobs/jobs.

    Usage:
        ```python
        with JobSubmitClient(connection) as client:
            job = client.submit("USER.JCL(IEFBR14)")
        ```
    """

    def submit(
        self, job_data_set: str, jcl_symbols: Optional[Mapping[str, str]] = None
    ) -> Job:
        """Submit the JCL stored in a data set or member.

        Args:
            job_data_set: Data set name, e.g. "USER.JCL(IEFBR14)"
            jcl_symbols: Values for JCL symbols referenced by the job

        Returns:
            Job document of the submitted job
        """
        return self.submit_common(
            SubmitJobParams(job_data_set=job_data_set, jcl_symbols=dict(jcl_symbols or {}))
        )

    def submit_common(self, params: SubmitJobParams) -> Job:
        if not params.job_data_set:
            raise InvalidParameterError("job data set not specified")
        body = {"file": f"//'{params.job_data_set}'"}
        headers = jcl_symbol_headers(params.jcl_symbols)
        data = self._put(constants.RESOURCE, json=body, headers=headers or None)
        job = self._to_job(data)
        logger.info(f"Submitted {params.job_data_set} as {job.job_name}({job.job_id})")
        return job

    def submit_jcl(
        self,
        jcl: str,
        internal_reader_recfm: str = constants.DEFAULT_INTRDR_RECFM,
        internal_reader_lrecl: int = constants.DEFAULT_INTRDR_LRECL,
        jcl_symbols: Optional[Mapping[str, str]] = None,
    ) -> Job:
        """Submit JCL passed as text.

        Args:
            jcl: JCL statements
            internal_reader_recfm: Record format for the internal reader ("F" or "V")
            internal_reader_lrecl: Logical record length for the internal reader
            jcl_symbols: Values for JCL symbols referenced by the job
        """
        return self.submit_jcl_common(
            SubmitJclParams(
                jcl=jcl,
                internal_reader_recfm=internal_reader_recfm,
                internal_reader_lrecl=internal_reader_lrecl,
                jcl_symbols=dict(jcl_symbols or {}),
            )
        )

    def submit_jcl_common(self, params: SubmitJclParams) -> Job:
        if not params.jcl or not params.jcl.strip():
            raise InvalidParameterError("jcl not specified")
        headers = {
            constants.X_IBM_INTRDR_CLASS: constants.DEFAULT_INTRDR_CLASS,
            constants.X_IBM_INTRDR_RECFM: params.internal_reader_recfm,
            constants.X_IBM_INTRDR_LRECL: str(params.internal_reader_lrecl),
            constants.X_IBM_INTRDR_MODE: "TEXT",
        }
        headers.update(jcl_symbol_headers(params.jcl_symbols))
        data = self._put_text(constants.RESOURCE, params.jcl, headers=headers)
        job = self._to_job(data)
        logger.info(f"Submitted JCL as {job.job_name}({job.job_id})")
        return job

    @staticmethod
    def _to_job(data: object) -> Job:
        if not isinstance(data, dict):
            raise APIResponseParseError("submit did not return a job document")
        return Job.model_validate(data)
