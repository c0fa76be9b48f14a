"""Unit tests for job models."""

import pytest
from pydantic import ValidationError

from zosmf_sdk.jobs.models import (
    GetJobParams,
    Job,
    JobFile,
    JobStepData,
    MonitorParams,
)
from zosmf_sdk.jobs.status import JobStatus
from zosmf_sdk.shared.exceptions import InvalidParameterError

JOB_DOCUMENT = {
    "jobid": "JOB00123",
    "jobname": "TESTJOB",
    "subsystem": "JES2",
    "owner": "IBMUSER",
    "status": "OUTPUT",
    "type": "JOB",
    "class": "A",
    "retcode": "CC 0000",
    "url": "https://zos.example.com:10443/zosmf/restjobs/jobs/J0000123SY1.....C8B2D1E4.......%3A",
    "files-url": "https://zos.example.com:10443/zosmf/restjobs/jobs/.../files",
    "job-correlator": "J0000123SY1.....C8B2D1E4.......:",
    "phase": 20,
    "phase-name": "Job is on the hard copy queue",
    "step-data": [
        {
            "step-number": 1,
            "step-name": "STEP1",
            "program-name": "IEFBR14",
            "completion": "CC 0000",
            "active": False,
            "smfid": "SY1",
        }
    ],
}


class TestJob:
    def test_parse_document(self) -> None:
        job = Job.model_validate(JOB_DOCUMENT)
        assert job.job_id == "JOB00123"
        assert job.job_name == "TESTJOB"
        assert job.job_class == "A"
        assert job.files_url.endswith("/files")
        assert job.phase_name == "Job is on the hard copy queue"
        assert job.step_data[0].program_name == "IEFBR14"
        assert job.step_data[0].active is False

    def test_missing_fields_are_optional(self) -> None:
        job = Job.model_validate({"jobname": "A"})
        assert job.job_id is None
        assert job.status is None
        assert job.step_data == []

    def test_with_step_data_returns_copy(self) -> None:
        job = Job(job_name="A", job_id="J1", status="OUTPUT")
        steps = [JobStepData(step_number=1, step_name="S1")]

        enriched = job.with_step_data(steps)

        assert enriched.step_data[0].step_name == "S1"
        assert job.step_data == []
        assert enriched.status == "OUTPUT"


class TestJobFile:
    def test_parse(self) -> None:
        job_file = JobFile.model_validate(
            {
                "id": 2,
                "jobid": "JOB00123",
                "jobname": "TESTJOB",
                "ddname": "JESMSGLG",
                "stepname": "JES2",
                "class": "H",
                "recfm": "UA",
                "lrecl": 133,
                "byte-count": 1200,
                "record-count": 20,
                "records-url": "https://zos.example.com/zosmf/restjobs/jobs/.../files/2/records",
            }
        )
        assert job_file.id == 2
        assert job_file.file_class == "H"
        assert job_file.record_count == 20


class TestGetJobParams:
    def test_defaults(self) -> None:
        assert GetJobParams().to_query() == {"owner": "*", "prefix": "*", "max-jobs": 1000}

    def test_job_id_filter(self) -> None:
        query = GetJobParams(prefix="TESTJOB", job_id="JOB00123").to_query()
        assert query["jobid"] == "JOB00123"
        assert query["prefix"] == "TESTJOB"

    def test_empty_filters_are_dropped(self) -> None:
        query = GetJobParams(owner=None, prefix=None, max_jobs=None).to_query()
        assert query == {}


class TestMonitorParams:
    def test_status_parsed_from_string(self) -> None:
        params = MonitorParams(job_name="A", job_id="J1", status="active")
        assert params.status is JobStatus.ACTIVE

    def test_unknown_status(self) -> None:
        with pytest.raises(InvalidParameterError):
            MonitorParams(job_name="A", job_id="J1", status="DONE")

    def test_status_and_message_are_exclusive(self) -> None:
        with pytest.raises(ValidationError):
            MonitorParams(job_name="A", job_id="J1", status="OUTPUT", message="HELLO")

    @pytest.mark.parametrize(
        "overrides",
        [{"job_name": ""}, {"job_id": ""}, {"attempts": 0}, {"watch_delay": -1}, {"line_limit": 0}],
    )
    def test_invalid_values(self, overrides) -> None:
        values = {"job_name": "A", "job_id": "J1", **overrides}
        with pytest.raises(ValidationError):
            MonitorParams(**values)

    def test_with_defaults_fills_unset_values(self) -> None:
        params = MonitorParams(job_name="A", job_id="J1", attempts=5)

        resolved = params.with_defaults(attempts=1000, watch_delay=3000, line_limit=1000)

        assert resolved.attempts == 5
        assert resolved.watch_delay == 3000
        assert resolved.line_limit == 1000
        assert resolved.status is JobStatus.OUTPUT
        assert params.watch_delay is None

    def test_with_defaults_keeps_message_mode(self) -> None:
        params = MonitorParams(job_name="A", job_id="J1", message="READY")
        resolved = params.with_defaults(attempts=1, watch_delay=0, line_limit=10)
        assert resolved.status is None
        assert resolved.message == "READY"
