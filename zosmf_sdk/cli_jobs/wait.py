"""
Wait subcommands
"""

from typing import Optional

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.cli_jobs.output import console, jobs_table, steps_table
from zosmf_sdk.jobs.models import StatusWaitResult, StepDataOutcome
from zosmf_sdk.jobs.monitor import JobMonitor


def run_wait_status(
    connection: ZOSConnection,
    job_name: str,
    job_id: str,
    status: str,
    attempts: Optional[int] = None,
    watch_delay: Optional[int] = None,
) -> StatusWaitResult:
    """
    Wait until the job reaches status and show the final snapshot
    """
    console.print(f"[cyan]Waiting for {job_name}({job_id}) to reach {status.upper()}...[/cyan]")
    with JobMonitor(connection) as monitor:
        result = monitor.wait_for_status(
            job_name, job_id, status, attempts=attempts, watch_delay=watch_delay
        )

    console.print(jobs_table([result.job], title=f"{job_name}({job_id})"))
    if result.step_data is StepDataOutcome.ATTACHED and result.job.step_data:
        console.print(steps_table(result.job))
    elif result.step_data is StepDataOutcome.UNAVAILABLE:
        console.print(f"[yellow]Step data unavailable: {result.step_data_error}[/yellow]")
    console.print(f"[green]Done after {result.attempts} poll(s).[/green]")
    return result


def run_wait_message(
    connection: ZOSConnection,
    job_name: str,
    job_id: str,
    message: str,
    attempts: Optional[int] = None,
    watch_delay: Optional[int] = None,
    line_limit: Optional[int] = None,
) -> bool:
    """
    Wait until message shows up in the job output
    """
    console.print(f'[cyan]Waiting for "{message}" in {job_name}({job_id})...[/cyan]')
    with JobMonitor(connection) as monitor:
        found = monitor.wait_for_message(
            job_name,
            job_id,
            message,
            attempts=attempts,
            watch_delay=watch_delay,
            line_limit=line_limit,
        )

    if found:
        console.print("[green]Message found.[/green]")
    else:
        console.print("[yellow]Message not found.[/yellow]")
    return found
