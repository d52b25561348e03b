#!/usr/bin/env python3
"""
Career Tracker CLI

Read-only views over a user's tracked career data.

Commands:
    jobs      - List job applications (search by text, filter by status)
    deadlines - Show applications with deadlines in the reminder window
    watch     - Keep running and print a reminder whenever a deadline comes close
    recommend - Recommend learning resources from the user's skills
    dashboard - Summarize applications, goals and skills
    events    - Show recent events from the event log

Examples:\n

    career_tracker.py jobs jane@example.com -s applied        # Applied jobs only

    career_tracker.py deadlines jane@example.com --days 14    # Two-week window

    career_tracker.py watch jane@example.com                  # Hourly reminders

    career_tracker.py recommend jane@example.com -c soft      # Soft-skill resources

    career_tracker.py events -e export_completed              # Recent exports
"""

import json
import time
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from catalyst.contexts.tracking import CareerDataStore, DataStoreError, JobStatus, SkillCategory
from catalyst.contexts.tracking.job_tracker import dashboard_summary, search_jobs
from catalyst.contexts.tracking.logger import setup_tracking_logger
from catalyst.contexts.tracking.notifications import (
    DeadlineNotifier,
    find_approaching_deadlines,
    render_reminder,
)
from catalyst.contexts.tracking.recommendations import filter_by_category, recommend_resources
from catalyst.utils.event_logging import get_recent_events
from catalyst.utils.logger import session_log_dir
from catalyst.utils.report_formatter import Column, TableFormatter, format_percentage
from catalyst.utils.timestamp import format_timestamp

app = typer.Typer(
    help="View tracked job applications, goals and learning resources",
    add_completion=False,
    invoke_without_command=True,
)

EmailArgument = Annotated[str, typer.Argument(help="User email")]
DataDirOption = Annotated[
    Optional[Path],
    typer.Option("--data-dir", "-d", help="Directory with users.json (default: CATALYST_DATA_PATH)"),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def open_store(data_dir: Optional[Path]) -> CareerDataStore:
    try:
        return CareerDataStore(data_dir)
    except DataStoreError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def find_user(store: CareerDataStore, email: str):
    user = store.get_user(email)
    if user is None:
        typer.secho(f"Error: no user with email '{email}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return user


def parse_enum(enum_cls, value: Optional[str], option: str):
    """Map a command-line value like "offer_received" to an enum member."""
    if value is None:
        return None
    try:
        return enum_cls[value.strip().upper().replace("-", "_").replace(" ", "_")]
    except KeyError:
        valid = ", ".join(member.name.lower() for member in enum_cls)
        typer.secho(f"Error: invalid {option} '{value}'. Valid: {valid}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("jobs")
def jobs_command(
    email: EmailArgument,
    search: Annotated[
        str, typer.Option("--search", "-q", help="Text matched against position, company, location")
    ] = "",
    status: Annotated[
        Optional[str], typer.Option("--status", "-s", help="Only jobs with this status")
    ] = None,
    data_dir: DataDirOption = None,
):
    """
    List job applications.

    Examples:\n

        $ career_tracker.py jobs jane@example.com                  # All applications

        $ career_tracker.py jobs jane@example.com -q remote        # Search text
    """
    user = find_user(open_store(data_dir), email)
    jobs = search_jobs(user.job_applications, search, parse_enum(JobStatus, status, "status"))

    table = TableFormatter(
        [
            Column("Position", 28),
            Column("Company", 22),
            Column("Location", 16),
            Column("Status", 15),
            Column("Deadline", 14),
        ]
    )
    table.add_section_header(f"Job applications: {user.full_name}").add_table_header()
    table.add_separator()
    for job in jobs:
        table.add_row([job.position, job.company_name, job.location, job.status, job.formatted_deadline])
    table.add_separator().add_text(f"{len(jobs)} of {len(user.job_applications)} application(s)")
    typer.echo(table.render())


@app.command("deadlines")
def deadlines_command(
    email: EmailArgument,
    days: Annotated[int, typer.Option("--days", help="Reminder window in days", min=0)] = 10,
    data_dir: DataDirOption = None,
):
    """
    Show applications whose deadline falls within the reminder window.

    Examples:\n

        $ career_tracker.py deadlines jane@example.com             # Next 10 days
    """
    user = find_user(open_store(data_dir), email)
    jobs = find_approaching_deadlines(user.job_applications, date.today(), days)

    if not jobs:
        typer.secho(f"No deadlines in the next {days} days", fg=typer.colors.GREEN)
        return
    typer.secho(render_reminder(jobs, days), fg=typer.colors.YELLOW)


@app.command("watch")
def watch_command(
    email: EmailArgument,
    interval: Annotated[
        float, typer.Option("--interval", help="Seconds between checks", min=1)
    ] = 3600.0,
    days: Annotated[int, typer.Option("--days", help="Reminder window in days", min=0)] = 10,
    data_dir: DataDirOption = None,
):
    """
    Keep running and print a reminder whenever an application deadline comes close.

    Each job is reported once per run. Stop with Ctrl+C.

    Examples:\n

        $ career_tracker.py watch jane@example.com                 # Hourly checks

        $ career_tracker.py watch jane@example.com --interval 600  # Every 10 minutes
    """
    store = open_store(data_dir)
    store.current_user = find_user(store, email)
    setup_tracking_logger(session_log_dir("watch"))

    def current_user():
        store.load()
        return store.current_user

    def print_reminder(message, jobs):
        typer.secho(message, fg=typer.colors.YELLOW)

    notifier = DeadlineNotifier(current_user, print_reminder, interval_s=interval, window_days=days)
    notifier.start()
    try:
        while notifier.is_running:
            time.sleep(1)
    except KeyboardInterrupt:
        typer.echo("")
    finally:
        notifier.stop()


@app.command("recommend")
def recommend_command(
    email: EmailArgument,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Only resources for this skill category"),
    ] = None,
    data_dir: DataDirOption = None,
):
    """
    Recommend learning resources from the user's skills.

    Examples:\n

        $ career_tracker.py recommend jane@example.com             # All recommendations

        $ career_tracker.py recommend jane@example.com -c language # Language resources
    """
    store = open_store(data_dir)
    user = find_user(store, email)
    resources = filter_by_category(
        recommend_resources(user.skills, store.resources),
        parse_enum(SkillCategory, category, "category"),
    )

    table = TableFormatter(
        [Column("Rating", 7), Column("Title", 40), Column("Type", 9), Column("Provider", 20)]
    )
    table.add_section_header(f"Recommended resources: {user.full_name}").add_table_header()
    table.add_separator()
    for resource in resources:
        table.add_row([resource.star_rating, resource.title, resource.type, resource.provider])
    table.add_separator().add_text(f"{len(resources)} recommendation(s)")
    typer.echo(table.render())


@app.command("dashboard")
def dashboard_command(email: EmailArgument, data_dir: DataDirOption = None):
    """
    Summarize applications, goals and skills.

    Examples:\n

        $ career_tracker.py dashboard jane@example.com
    """
    user = find_user(open_store(data_dir), email)
    summary = dashboard_summary(user, date.today())

    table = TableFormatter([Column("Item", 30), Column("Count", 8, ">"), Column("Share", 8, ">")])
    table.add_section_header(f"Welcome, {summary.full_name}!")

    table.add_text("Job applications").add_table_header().add_separator()
    for status, count in summary.job_counts.items():
        table.add_row([status, count, format_percentage(count, summary.total_jobs)])
    table.add_text("")

    table.add_text("Skills").add_separator()
    for category, count in summary.skills_by_category.items():
        table.add_row([category, count, format_percentage(count, len(user.skills))])
    table.add_text("")

    table.add_separator("=")
    table.add_text(f"Short-term goals completed: {summary.short_term_progress:.0%}")
    table.add_text(f"Long-term goals completed:  {summary.long_term_progress:.0%}")
    table.add_text(f"Achievements: {summary.achievement_count}")
    for goal in summary.overdue_goals:
        table.add_text(f"  Overdue: {goal}")
    for job in summary.approaching_deadlines:
        table.add_text(f"  Deadline soon: {job} ({job.formatted_deadline})")
    typer.echo(table.render())


@app.command("events")
def events_command(
    n: Annotated[int, typer.Option("--num", "-n", help="Number of recent events to show")] = 10,
    subject: Annotated[
        Optional[str], typer.Option("--subject", "-s", help="Filter to events for this subject")
    ] = None,
    event_type: Annotated[
        Optional[str], typer.Option("--event-type", "-e", help="Filter to events of this type")
    ] = None,
    compact: Annotated[
        bool, typer.Option("--compact", "-c", help="Print one event per line")
    ] = False,
    relative: Annotated[
        bool, typer.Option("--relative", "-r", help="Show event times relative to now")
    ] = False,
):
    """
    Show the last n events from the event log.

    Examples:\n

        $ career_tracker.py events                          # Last 10 events

        $ career_tracker.py events -e deadline_reminder     # Recent reminders
    """
    events = get_recent_events(n=n, subject=subject, event_type=event_type)

    if not events:
        typer.secho("No events found", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    if not compact:
        typer.secho(f"\nShowing last {len(events)} event(s):", fg=typer.colors.BLUE)
        typer.echo("")

    for event in events:
        if compact:
            typer.echo(json.dumps(event))
        else:
            typer.secho(format_timestamp(event["timestamp"], relative=relative), bold=True)
            typer.echo(json.dumps(event, indent=2))
            typer.echo("")


if __name__ == "__main__":
    app()
