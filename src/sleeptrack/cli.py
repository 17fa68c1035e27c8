"""sleeptrack Command Line Interface."""

from datetime import date, datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sleeptrack.dataio import ExportData
from sleeptrack.log import LogLevel, configure_logging
from sleeptrack.models import InsightPriority

app = typer.Typer(
    name="sleeptrack",
    help="sleeptrack - Sleep, workout and mood analytics",
    no_args_is_help=True,
)
console = Console()

FILE_OPTION = typer.Option(None, "--file", "-f", help="Export bundle (defaults to settings)")
AS_OF_OPTION = typer.Option(None, "--as-of", formats=["%Y-%m-%d"], help="Reference day")

PRIORITY_STYLES = {"high": "red", "medium": "yellow", "low": "green"}


@app.callback()
def main(
    log_level: LogLevel = typer.Option(None, "--log-level", case_sensitive=False, help="Log level"),
):
    """Configure logging before any command runs."""
    configure_logging(log_level.value if log_level else None)


def _load(file: Path | None) -> ExportData:
    from sleeptrack.dataio import load_bundle
    from sleeptrack.errors import DataImportError

    try:
        return load_bundle(file)
    except DataImportError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        for error in e.errors[:10]:
            console.print(f"  {escape(error)}")
        raise typer.Exit(code=1) from e


def _day(as_of: datetime | None) -> date | None:
    return as_of.date() if as_of else None


@app.command()
def score(
    file: Path = FILE_OPTION,
    last: int = typer.Option(7, help="Number of most recent nights to show"),
):
    """Show quality scores of recent nights."""
    from sleeptrack.utils import format_duration

    bundle = _load(file)
    nights = sorted(bundle.sleep_records, key=lambda r: r.date, reverse=True)[:last]

    if not nights:
        console.print("[yellow]No sleep records found[/yellow]")
        return

    table = Table(title="Sleep Quality")
    table.add_column("Date", style="cyan")
    table.add_column("Duration", style="white")
    table.add_column("Efficiency", style="white")
    table.add_column("Score", style="green")

    for night in nights:
        table.add_row(
            night.date.isoformat(),
            format_duration(night.duration),
            f"{night.efficiency:g}%",
            str(night.quality_score),
        )

    console.print(table)


@app.command()
def streak(file: Path = FILE_OPTION, as_of: datetime = AS_OF_OPTION):
    """Show current and best tracking streaks."""
    from sleeptrack.goals import calculate_streak

    bundle = _load(file)
    result = calculate_streak(bundle.sleep_records, today=_day(as_of))

    console.print(Panel("Tracking Streak", style="blue"))
    console.print(f"  Current: [bold]{result.current}[/bold] day(s)")
    console.print(f"  Best: [bold]{result.best}[/bold] day(s)")
    if result.start_date:
        console.print(f"  Running since: {result.start_date.isoformat()}")


@app.command()
def trends(file: Path = FILE_OPTION):
    """Show duration, efficiency and quality trends."""
    from sleeptrack.analytics import (
        sleep_duration_trend,
        sleep_efficiency_trend,
        sleep_quality_trend,
    )

    bundle = _load(file)
    records = bundle.sleep_records

    table = Table(title="Sleep Trends")
    table.add_column("Metric", style="cyan")
    table.add_column("Direction", style="white")
    table.add_column("R²", style="white")
    table.add_column("Period", style="green")

    for name, trend in (
        ("Duration", sleep_duration_trend(records)),
        ("Efficiency", sleep_efficiency_trend(records)),
        ("Quality", sleep_quality_trend(records)),
    ):
        table.add_row(name, trend.direction.value, f"{trend.significance:.2f}", trend.period)

    console.print(table)


@app.command()
def insights(
    file: Path = FILE_OPTION,
    priority: InsightPriority = typer.Option(None, help="Only show one priority"),
):
    """Generate insights and recommendations."""
    from sleeptrack.insights import filter_by_priority, generate_all_insights

    bundle = _load(file)
    results = generate_all_insights(
        bundle.sleep_records, bundle.workout_records, bundle.mood_energy_records
    )
    if priority:
        results = filter_by_priority(results, priority)

    console.print(Panel("Insights", style="blue"))
    if not results:
        console.print("[yellow]No insights found[/yellow]")
        return

    for insight in results:
        style = PRIORITY_STYLES[insight.priority.value]
        console.print(f"\n[{style}]● {insight.title}[/{style}] [dim]({insight.type.value})[/dim]")
        console.print(f"  {insight.description}")


@app.command()
def goals(file: Path = FILE_OPTION, as_of: datetime = AS_OF_OPTION):
    """Show progress of every goal in the bundle."""
    from sleeptrack.goals import calculate_goal_progress

    bundle = _load(file)
    if not bundle.goals:
        console.print("[yellow]No goals found[/yellow]")
        return

    table = Table(title="Goals")
    table.add_column("Goal", style="cyan")
    table.add_column("Type", style="white")
    table.add_column("Progress", style="green")
    table.add_column("Status", style="white")
    table.add_column("Days left", style="white")

    for goal in bundle.goals:
        progress = calculate_goal_progress(
            goal, bundle.sleep_records, bundle.workout_records, today=_day(as_of)
        )
        remaining = "" if progress.remaining_days is None else str(progress.remaining_days)
        table.add_row(
            goal.title or goal.id,
            goal.type.value,
            f"{progress.current_value:g} / {progress.target_value:g} ({progress.percentage:.0f}%)",
            progress.status.value,
            remaining,
        )

    console.print(table)


@app.command()
def report(
    period: str = typer.Argument("weekly", help="Report period: weekly or monthly"),
    file: Path = FILE_OPTION,
    as_of: datetime = AS_OF_OPTION,
):
    """Show the weekly or monthly report."""
    from sleeptrack.reports import generate_monthly_report, generate_weekly_report

    if period not in ("weekly", "monthly"):
        console.print(f"[red]Unknown period: {period}[/red]")
        raise typer.Exit(code=2)

    bundle = _load(file)
    generate = generate_weekly_report if period == "weekly" else generate_monthly_report
    result = generate(
        bundle.sleep_records,
        bundle.workout_records,
        bundle.mood_energy_records,
        today=_day(as_of),
    )

    console.print(
        Panel(
            f"{period.capitalize()} Report ({result.start_date} - {result.end_date})",
            style="blue",
        )
    )
    console.print(f"\n[bold]{result.summary.overall}[/bold]\n")
    for highlight in result.summary.highlights:
        console.print(f"  • {highlight}")

    if period == "monthly":
        table = Table(title="Weekly Breakdown")
        table.add_column("Week", style="cyan")
        table.add_column("Nights", style="white")
        table.add_column("Workouts", style="white")
        table.add_column("Overall", style="green")
        for week in result.weekly_breakdown:
            table.add_row(
                f"{week.start_date} - {week.end_date}",
                str(week.sleep_stats.total_records),
                str(week.workout_stats.total_records),
                week.summary.overall,
            )
        console.print(table)


@app.command()
def validate(file: Path = typer.Argument(..., help="Export bundle to check")):
    """Validate an export bundle before importing it."""
    from sleeptrack.dataio import validate_import

    try:
        text = file.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]✗ Cannot read {file}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    result = validate_import(text)

    table = Table(title="Bundle Contents")
    table.add_column("Collection", style="cyan")
    table.add_column("Records", style="green")
    for key, count in result.data_counts.items():
        table.add_row(key, str(count))
    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]! {escape(warning)}[/yellow]")
    for error in result.errors:
        console.print(f"[red]✗ {escape(error)}[/red]")

    if not result.is_valid:
        raise typer.Exit(code=1)
    console.print("[green]✓ Bundle is valid[/green]")


@app.command()
def version():
    """Show sleeptrack version."""
    from sleeptrack import __version__

    console.print(f"sleeptrack v{__version__}")


if __name__ == "__main__":
    app()
