"""
Shared console output for the jobs CLI
"""

from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console
from rich.table import Table

from zosmf_sdk.api.exceptions import APIError
from zosmf_sdk.jobs.models import Job
from zosmf_sdk.shared.exceptions import ZosmfSDKError

console = Console()


@contextmanager
def cli_errors() -> Iterator[None]:
    """Print SDK and z/OSMF errors and exit with status 1."""
    try:
        yield
    except (APIError, ZosmfSDKError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e


def jobs_table(jobs: list[Job], title: str = "Jobs") -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Job name", style="green")
    table.add_column("Job id", style="cyan")
    table.add_column("Owner", style="white")
    table.add_column("Status", style="yellow")
    table.add_column("Retcode", style="white")

    for job in jobs:
        table.add_row(
            job.job_name or "",
            job.job_id or "",
            job.owner or "",
            job.status or "",
            job.retcode or "",
        )
    return table


def steps_table(job: Job) -> Table:
    table = Table(title="Steps", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Step", style="green")
    table.add_column("Proc step", style="white")
    table.add_column("Program", style="white")
    table.add_column("Completion", style="yellow")

    for step in job.step_data:
        table.add_row(
            "" if step.step_number is None else str(step.step_number),
            step.step_name or "",
            step.proc_step_name or "",
            step.program_name or "",
            step.completion or "",
        )
    return table
