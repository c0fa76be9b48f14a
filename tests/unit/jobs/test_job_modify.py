"""Unit tests for job cancel and delete."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from zosmf_sdk.api.response import ZosmfResponse
from zosmf_sdk.jobs.job_modify import JobCancelClient, JobDeleteClient
from zosmf_sdk.jobs.models import Job
from zosmf_sdk.shared.exceptions import InvalidParameterError


class TestJobDeleteClient:
    def test_delete(self, connection) -> None:
        client = JobDeleteClient(connection)
        response = ZosmfResponse(status_code=200, status_text="OK", body={"status": 0})
        with patch.object(client, "_delete", return_value=response) as delete:
            result = client.delete("TESTJOB", "JOB00123")

        delete.assert_called_once_with(
            "/zosmf/restjobs/jobs/TESTJOB/JOB00123",
            headers={"X-IBM-Job-Modify-Version": "2.0"},
        )
        assert result is response

    def test_delete_async_version(self, connection) -> None:
        client = JobDeleteClient(connection)
        response = ZosmfResponse(status_code=202, status_text="Accepted")
        with patch.object(client, "_delete", return_value=response) as delete:
            result = client.delete_by_job(Job(job_name="A", job_id="J1"), version="1.0")

        assert delete.call_args.kwargs["headers"] == {"X-IBM-Job-Modify-Version": "1.0"}
        assert result.body is None

    def test_invalid_version(self, connection) -> None:
        with pytest.raises(InvalidParameterError):
            JobDeleteClient(connection).delete("A", "J1", version="3.0")

    def test_missing_identity(self, connection) -> None:
        with pytest.raises(InvalidParameterError):
            JobDeleteClient(connection).delete("", "J1")


class TestJobCancelClient:
    def test_cancel(self, connection) -> None:
        client = JobCancelClient(connection)
        response = ZosmfResponse(status_code=200, status_text="OK", body={"status": 0})
        with patch.object(client, "_put_raw", return_value=response) as put_raw:
            assert client.cancel("TESTJOB", "JOB00123") is response

        put_raw.assert_called_once_with(
            "/zosmf/restjobs/jobs/TESTJOB/JOB00123",
            json={"request": "cancel", "version": "2.0"},
        )

    def test_cancel_by_job(self, connection) -> None:
        client = JobCancelClient(connection)
        response = ZosmfResponse(status_code=202)
        with patch.object(client, "_put_raw", return_value=response) as put_raw:
            client.cancel_by_job(Job(job_name="A", job_id="J1"), version="1.0")

        assert put_raw.call_args.kwargs["json"]["version"] == "1.0"

    def test_cancel_by_incomplete_job(self, connection) -> None:
        with pytest.raises(InvalidParameterError):
            JobCancelClient(connection).cancel_by_job(Job(job_name="A"))
