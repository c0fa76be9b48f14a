"""
z/OSMF Jobs CLI

Command line interface for listing, submitting, monitoring and deleting jobs.
"""

from pathlib import Path
from typing import List, Optional

import typer

from zosmf_sdk.cli_jobs.output import cli_errors
from zosmf_sdk.shared.utils.logger_config import setup_logger

app = typer.Typer(
    name="zosmf-jobs",
    help="z/OSMF job tool",
    rich_markup_mode="rich",
    add_completion=False,
)


def _connection(ctx: typer.Context):
    from zosmf_sdk.config.team_config import resolve_connection

    return resolve_connection(ctx.obj.get("config"), ctx.obj.get("profile"))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Team config file (zowe.config.json)"
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="zosmf profile name in the team config"
    ),
) -> None:
    """z/OSMF job tool"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    ctx.obj["profile"] = profile
    setup_logger(verbose=verbose)


@app.command(name="list")
def list_command(
    ctx: typer.Context,
    owner: str = typer.Option("*", "--owner", "-o", help="Job owner filter"),
    prefix: str = typer.Option("*", "--prefix", help="Job name prefix filter"),
    max_jobs: int = typer.Option(1000, "--max-jobs", min=1, help="Maximum number of jobs"),
):
    """
    List jobs

    Examples:
        zosmf-jobs list --owner IBMUSER --prefix TEST*
    """
    from zosmf_sdk.cli_jobs.jobs import run_list

    with cli_errors():
        run_list(_connection(ctx), owner=owner, prefix=prefix, max_jobs=max_jobs)


@app.command(name="status")
def status_command(
    ctx: typer.Context,
    job_name: str = typer.Argument(..., help="Job name"),
    job_id: str = typer.Argument(..., help="Job id"),
    step_data: bool = typer.Option(False, "--step-data", "-s", help="Show job steps"),
):
    """
    Show the status of one job

    Examples:
        zosmf-jobs status MYJOB JOB00123 --step-data
    """
    from zosmf_sdk.cli_jobs.jobs import run_status

    with cli_errors():
        run_status(_connection(ctx), job_name=job_name, job_id=job_id, step_data=step_data)


@app.command(name="wait")
def wait_command(
    ctx: typer.Context,
    job_name: str = typer.Argument(..., help="Job name"),
    job_id: str = typer.Argument(..., help="Job id"),
    status: str = typer.Option("OUTPUT", "--status", help="Desired status (INPUT/ACTIVE/OUTPUT)"),
    attempts: Optional[int] = typer.Option(None, "--attempts", "-a", min=1, help="Number of polls"),
    delay: Optional[int] = typer.Option(
        None, "--delay", "-d", min=0, help="Milliseconds between polls"
    ),
):
    """
    Wait for a job status

    Exits with status 1 when the status is not reached.

    Examples:
        zosmf-jobs wait MYJOB JOB00123
        zosmf-jobs wait MYJOB JOB00123 --status ACTIVE --attempts 20 --delay 500
    """
    from zosmf_sdk.cli_jobs.wait import run_wait_status

    with cli_errors():
        run_wait_status(
            _connection(ctx),
            job_name=job_name,
            job_id=job_id,
            status=status,
            attempts=attempts,
            watch_delay=delay,
        )


@app.command(name="wait-message")
def wait_message_command(
    ctx: typer.Context,
    job_name: str = typer.Argument(..., help="Job name"),
    job_id: str = typer.Argument(..., help="Job id"),
    message: str = typer.Argument(..., help="Text to look for in the job output"),
    attempts: Optional[int] = typer.Option(None, "--attempts", "-a", min=1, help="Number of polls"),
    delay: Optional[int] = typer.Option(
        None, "--delay", "-d", min=0, help="Milliseconds between polls"
    ),
    line_limit: Optional[int] = typer.Option(
        None, "--line-limit", "-l", min=1, help="Trailing output lines to scan"
    ),
):
    """
    Wait for a message in the job output

    Exits with status 1 when the message is not found.

    Examples:
        zosmf-jobs wait-message MYJOB JOB00123 "READY"
    """
    from zosmf_sdk.cli_jobs.wait import run_wait_message

    with cli_errors():
        found = run_wait_message(
            _connection(ctx),
            job_name=job_name,
            job_id=job_id,
            message=message,
            attempts=attempts,
            watch_delay=delay,
            line_limit=line_limit,
        )
    if not found:
        raise typer.Exit(code=1)


@app.command(name="submit")
def submit_command(
    ctx: typer.Context,
    data_set: str = typer.Argument(..., help="Data set holding the JCL, e.g. USER.JCL(TEST)"),
    symbol: Optional[List[str]] = typer.Option(
        None, "--symbol", help="JCL symbol as NAME=VALUE (repeatable)"
    ),
):
    """
    Submit a job from a data set

    Examples:
        zosmf-jobs submit "USER.JCL(IEFBR14)" --symbol HLQ=USER
    """
    from zosmf_sdk.cli_jobs.modify import parse_symbols, run_submit

    with cli_errors():
        run_submit(_connection(ctx), data_set=data_set, jcl_symbols=parse_symbols(symbol or []))


@app.command(name="delete")
def delete_command(
    ctx: typer.Context,
    job_name: str = typer.Argument(..., help="Job name"),
    job_id: str = typer.Argument(..., help="Job id"),
    version: str = typer.Option("2.0", "--version", help="1.0 asynchronous, 2.0 synchronous"),
):
    """
    Delete (purge) a job

    Examples:
        zosmf-jobs delete MYJOB JOB00123
    """
    from zosmf_sdk.cli_jobs.modify import run_delete

    with cli_errors():
        run_delete(_connection(ctx), job_name=job_name, job_id=job_id, version=version)


if __name__ == "__main__":
    app()
