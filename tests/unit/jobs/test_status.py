"""Unit tests for the job status order."""

import pytest

from zosmf_sdk.jobs.status import JOB_STATUS_ORDER, JobStatus, order_index_of_status
from zosmf_sdk.shared.exceptions import InvalidParameterError


class TestJobStatusOrder:
    def test_order(self) -> None:
        assert JOB_STATUS_ORDER == ("INPUT", "ACTIVE", "OUTPUT")

    def test_indexes_are_increasing(self) -> None:
        assert (
            order_index_of_status("INPUT")
            < order_index_of_status("ACTIVE")
            < order_index_of_status("OUTPUT")
        )

    def test_enum_member_lookup(self) -> None:
        assert order_index_of_status(JobStatus.ACTIVE) == 1

    @pytest.mark.parametrize("name", ["", "output", "WAITING", None])
    def test_unknown_status(self, name) -> None:
        assert order_index_of_status(name) == -1


class TestJobStatusParse:
    def test_member_passthrough(self) -> None:
        assert JobStatus.parse(JobStatus.INPUT) is JobStatus.INPUT

    def test_string_is_case_insensitive(self) -> None:
        assert JobStatus.parse(" active ") is JobStatus.ACTIVE

    def test_str_is_value(self) -> None:
        assert str(JobStatus.OUTPUT) == "OUTPUT"

    @pytest.mark.parametrize("value", ["DONE", "", 3, None])
    def test_invalid_value(self, value) -> None:
        with pytest.raises(InvalidParameterError):
            JobStatus.parse(value)
