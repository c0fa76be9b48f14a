"""
Job list and status subcommands
"""

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.cli_jobs.output import console, jobs_table, steps_table
from zosmf_sdk.jobs.job_get import JobGetClient
from zosmf_sdk.jobs.models import GetJobParams


def run_list(connection: ZOSConnection, owner: str, prefix: str, max_jobs: int) -> None:
    """
    Show the jobs matching owner and prefix
    """
    with JobGetClient(connection) as client:
        jobs = client.get_jobs(GetJobParams(owner=owner, prefix=prefix, max_jobs=max_jobs))

    if not jobs:
        console.print("[yellow]No jobs found.[/yellow]")
        return

    console.print(jobs_table(jobs))
    console.print(f"\n[bold]Total: {len(jobs)} jobs[/bold]\n")


def run_status(connection: ZOSConnection, job_name: str, job_id: str, step_data: bool) -> None:
    """
    Show one job, optionally with its steps
    """
    with JobGetClient(connection) as client:
        job = client.get_status(job_name, job_id, step_data=step_data)

    console.print(jobs_table([job], title=f"{job_name}({job_id})"))
    if step_data and job.step_data:
        console.print(steps_table(job))
