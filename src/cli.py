"""Command Line Interface for Care-Campus-Registry.

This module provides a Typer CLI for running the demo scenarios and checking
course prerequisites, with Rich console output.
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from src.domain.university import AcademicRecord, prerequisites_for
from src.infrastructure.audit import ChangeAuditLogger
from src.infrastructure.logging_config import setup_logging
from src.infrastructure.settings import APP_VERSION, settings
from src.main import (
    create_hospital_system,
    create_registration_system,
    run_hospital_demo,
    run_university_demo,
)

# Initialize Typer app and Rich console
app = typer.Typer(
    name="registry",
    help="Care-Campus-Registry: hospital admission and course enrollment demos",
    add_completion=False
)
console = Console()


def _print_audit(audit: ChangeAuditLogger) -> None:
    if not audit.has_logs():
        return
    table = Table(title="Registry changes", show_header=True)
    table.add_column("Registry")
    table.add_column("Record")
    table.add_column("Change")
    table.add_column("By")
    for entry in audit.get_logs():
        table.add_row(entry["registry_name"], entry["record_id"], entry["change_type"], entry["changed_by"])
    console.print(table)


@app.command("hospital-demo")
def hospital_demo(
    show_audit: bool = typer.Option(False, "--audit", help="Show the registry audit trail"),
) -> None:
    """Admit a demo patient and print the result.

    Examples:
        registry hospital-demo
        registry --verbose hospital-demo --audit
    """
    audit = ChangeAuditLogger()
    lines = run_hospital_demo(create_hospital_system(audit_logger=audit))

    console.print("\n[bold blue]Hospital Management System[/bold blue]")
    for line in lines:
        console.print(line)
    if show_audit:
        _print_audit(audit)

    if not audit.has_logs():
        console.print("[red]✗[/red] Patient was not admitted")
        raise typer.Exit(code=1)


@app.command("university-demo")
def university_demo(
    show_audit: bool = typer.Option(False, "--audit", help="Show the registry audit trail"),
) -> None:
    """Enroll a demo student and print the result."""
    audit = ChangeAuditLogger()
    lines = run_university_demo(create_registration_system(audit_logger=audit))

    console.print("\n[bold blue]University Course Registration[/bold blue]")
    for line in lines:
        console.print(line)
    if show_audit:
        _print_audit(audit)

    if not audit.has_logs():
        console.print("[red]✗[/red] Student was not enrolled")
        raise typer.Exit(code=1)


@app.command()
def prerequisites(
    course_code: str = typer.Argument(..., help="Course code to check, e.g. CS201"),
    completed: Optional[List[str]] = typer.Option(
        None, "--completed", "-c", help="Completed course code (repeatable)"
    ),
) -> None:
    """Check whether a set of completed courses satisfies a course's prerequisites.

    Examples:
        registry prerequisites CS201 -c CS101
        registry prerequisites MATH301 -c MATH201
    """
    record = AcademicRecord(
        student_id="CLI",
        completed_courses={code: "" for code in (completed or [])},
    )
    required = prerequisites_for(course_code)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Course:", course_code)
    table.add_row("Requires:", ", ".join(required) if required else "[dim]none registered[/dim]")
    table.add_row("Completed:", ", ".join(completed) if completed else "[dim]none[/dim]")
    console.print(table)

    if record.meets_prerequisites(course_code):
        console.print("[green]✓[/green] Prerequisites met")
    else:
        console.print("[red]✗[/red] Prerequisites not met")
        raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """Display the active policy configuration."""
    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_row("Application:", settings.app_name)
    info_table.add_row("Version:", APP_VERSION)
    info_table.add_row("Hospital capacity:", str(settings.hospital_capacity))
    info_table.add_row("Minimum GPA:", f"{settings.min_gpa:.2f}")
    info_table.add_row("Max credits:", str(settings.max_credits))
    info_table.add_row("Log level:", settings.log_level)
    console.print(info_table)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines"),
    version: bool = typer.Option(False, "--version", help="Show version information"),
) -> None:
    """Care-Campus-Registry: hospital admission and course enrollment demos."""
    if version:
        console.print(f"Care-Campus-Registry v{APP_VERSION}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()
    setup_logging(
        use_json=json_logs or settings.log_json,
        log_level="DEBUG" if verbose else settings.log_level,
    )


if __name__ == "__main__":
    app()
