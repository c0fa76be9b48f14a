"""
Submit and delete subcommands
"""

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.cli_jobs.output import console
from zosmf_sdk.jobs.job_modify import JobDeleteClient
from zosmf_sdk.jobs.job_submit import JobSubmitClient
from zosmf_sdk.jobs.models import Job
from zosmf_sdk.shared.exceptions import InvalidParameterError


def parse_symbols(values: list[str]) -> dict[str, str]:
    """NAME=VALUE strings to a symbol mapping."""
    symbols: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise InvalidParameterError(f"JCL symbol must be NAME=VALUE: {item!r}")
        symbols[name.strip()] = value
    return symbols


def run_submit(connection: ZOSConnection, data_set: str, jcl_symbols: dict[str, str]) -> Job:
    with JobSubmitClient(connection) as client:
        job = client.submit(data_set, jcl_symbols=jcl_symbols)
    console.print(f"[green]Submitted[/green] {job.job_name}({job.job_id})")
    return job


def run_delete(connection: ZOSConnection, job_name: str, job_id: str, version: str) -> None:
    with JobDeleteClient(connection) as client:
        response = client.delete(job_name, job_id, version=version)
    console.print(
        f"[green]Delete accepted[/green] {job_name}({job_id}) "
        f"({response.status_code} {response.status_text})"
    )
