"""Unit tests for JobSubmitClient."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from zosmf_sdk.api.exceptions import APIResponseParseError
from zosmf_sdk.jobs.job_submit import JobSubmitClient, jcl_symbol_headers
from zosmf_sdk.shared.exceptions import InvalidParameterError

SUBMITTED = {"jobname": "IEFBR14", "jobid": "JOB00321", "status": "INPUT", "owner": "IBMUSER"}


@pytest.fixture
def client(connection):
    return JobSubmitClient(connection)


class TestJclSymbolHeaders:
    def test_headers(self) -> None:
        assert jcl_symbol_headers({"HLQ": "IBMUSER", "COUNT": 3}) == {
            "X-IBM-JCL-Symbol-HLQ": "IBMUSER",
            "X-IBM-JCL-Symbol-COUNT": "3",
        }

    def test_empty(self) -> None:
        assert jcl_symbol_headers(None) == {}

    def test_blank_name(self) -> None:
        with pytest.raises(InvalidParameterError):
            jcl_symbol_headers({"": "x"})


class TestSubmit:
    def test_submit_data_set(self, client) -> None:
        with patch.object(client, "_put", return_value=SUBMITTED) as put:
            job = client.submit("IBMUSER.JCL(IEFBR14)")

        put.assert_called_once_with(
            "/zosmf/restjobs/jobs", json={"file": "//'IBMUSER.JCL(IEFBR14)'"}, headers=None
        )
        assert job.job_id == "JOB00321"
        assert job.status == "INPUT"

    def test_submit_with_symbols(self, client) -> None:
        with patch.object(client, "_put", return_value=SUBMITTED) as put:
            client.submit("IBMUSER.JCL(IEFBR14)", jcl_symbols={"HLQ": "IBMUSER"})

        assert put.call_args.kwargs["headers"] == {"X-IBM-JCL-Symbol-HLQ": "IBMUSER"}

    def test_submit_empty_data_set(self, client) -> None:
        with pytest.raises(InvalidParameterError):
            client.submit("")

    def test_submit_unexpected_body(self, client) -> None:
        with patch.object(client, "_put", return_value=None):
            with pytest.raises(APIResponseParseError):
                client.submit("IBMUSER.JCL(IEFBR14)")


class TestSubmitJcl:
    def test_submit_jcl(self, client) -> None:
        jcl = "//IEFBR14 JOB ,CLASS=A\n//STEP1 EXEC PGM=IEFBR14"
        with patch.object(client, "_put_text", return_value=SUBMITTED) as put_text:
            job = client.submit_jcl(jcl)

        args, kwargs = put_text.call_args
        assert args == ("/zosmf/restjobs/jobs", jcl)
        assert kwargs["headers"] == {
            "X-IBM-Intrdr-Class": "A",
            "X-IBM-Intrdr-Recfm": "F",
            "X-IBM-Intrdr-Lrecl": "80",
            "X-IBM-Intrdr-Mode": "TEXT",
        }
        assert job.job_name == "IEFBR14"

    def test_submit_jcl_record_format(self, client) -> None:
        with patch.object(client, "_put_text", return_value=SUBMITTED) as put_text:
            client.submit_jcl(
                "//A JOB",
                internal_reader_recfm="V",
                internal_reader_lrecl=255,
                jcl_symbols={"X": "1"},
            )

        headers = put_text.call_args.kwargs["headers"]
        assert headers["X-IBM-Intrdr-Recfm"] == "V"
        assert headers["X-IBM-Intrdr-Lrecl"] == "255"
        assert headers["X-IBM-JCL-Symbol-X"] == "1"

    @pytest.mark.parametrize("jcl", ["", "   "])
    def test_submit_blank_jcl(self, client, jcl) -> None:
        with pytest.raises(InvalidParameterError):
            client.submit_jcl(jcl)
