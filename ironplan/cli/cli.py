"""Ironplan command line interface.

Developer and operations commands: run the API, create tables, preview a
plan without persisting it, and run the weekly generation job (meant to be
triggered by cron, e.g. every Sunday).
"""

from datetime import date, datetime

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ironplan.config.settings import settings
from ironplan.core.logger import setup_logger
from ironplan.db import session as db_session
from ironplan.onboarding.service import generate_next_week, generate_next_week_for_all
from ironplan.plans.enums import FitnessLevel
from ironplan.plans.errors import PlanGenerationError
from ironplan.plans.phases import calculate_phases, get_phase_for_week, get_training_start_date, get_week_start_date
from ironplan.plans.types import TrainingProfile
from ironplan.plans.validators import validate_training_profile
from ironplan.plans.volume import calculate_weekly_volume
from ironplan.plans.workouts import generate_week_workouts

app = typer.Typer(
    name="ironplan",
    help="Ironman training plan generator",
    no_args_is_help=True,
)
console = Console()

DEFAULT_HOST = "127.0.0.1"


def _parse_date(value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}") from e


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level")) -> None:
    setup_logger(level=log_level.upper(), log_file=settings.log_file)


@app.command()
def server(
    host: str = typer.Option(DEFAULT_HOST, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("ironplan.main:app", host=host, port=port, reload=reload)


@app.command()
def init_db() -> None:
    """Create database tables."""
    db_session.init_db()
    console.print("[green]Database tables created[/green]")


@app.command()
def preview_plan(
    race_date: str = typer.Option(..., "--race-date", help="Race date (YYYY-MM-DD)"),
    fitness_level: FitnessLevel = typer.Option(FitnessLevel.INTERMEDIATE, "--fitness-level", help="Fitness level"),
    target_hours: float = typer.Option(10.0, "--target-hours", help="Weekly target hours (MIN_TARGET_HOURS..MAX_TARGET_HOURS settings)"),
    weekday_time: str = typer.Option("06:00", "--weekday-time", help="Weekday workout time (HH:MM)"),
    weekend_time: str = typer.Option("08:00", "--weekend-time", help="Weekend workout time (HH:MM)"),
    as_of: str | None = typer.Option(None, "--as-of", help="Reference date (YYYY-MM-DD), defaults to today"),
    week: int | None = typer.Option(None, "--week", help="Also list the workouts of this week"),
) -> None:
    """Show the phase breakdown and weekly volume of a plan without saving it."""
    reference = _parse_date(as_of)
    profile = TrainingProfile(
        race_date=_parse_date(race_date),
        fitness_level=fitness_level,
        target_hours_per_week=target_hours,
        weekday_time=weekday_time,
        weekend_time=weekend_time,
    )

    try:
        validate_training_profile(profile, reference)
    except PlanGenerationError as e:
        console.print(Panel(Text(str(e), style="bold red"), title="Invalid plan", border_style="red"))
        raise typer.Exit(code=1) from e

    breakdown = calculate_phases(profile.race_date, reference)
    start = get_training_start_date(profile.race_date, reference)

    console.print(
        Panel(
            f"Total weeks: {breakdown.total_weeks}  |  base {breakdown.base_weeks}  build {breakdown.build_weeks}  "
            f"peak {breakdown.peak_weeks}  taper {breakdown.taper_weeks}\nTraining starts {start}",
            title="Phase breakdown",
            border_style="green",
        )
    )

    table = Table(title="Weekly volume")
    table.add_column("Week", justify="right")
    table.add_column("Starts")
    table.add_column("Phase")
    table.add_column("Hours", justify="right")
    for week_number in range(1, breakdown.total_weeks + 1):
        phase = get_phase_for_week(week_number, breakdown)
        hours = calculate_weekly_volume(week_number, phase, target_hours, fitness_level, breakdown)
        table.add_row(str(week_number), str(get_week_start_date(week_number, start)), phase.value, f"{hours:.2f}")
    console.print(table)

    if week is not None:
        workouts = generate_week_workouts("preview", week, get_week_start_date(week, start), profile, breakdown)
        detail = Table(title=f"Week {week} workouts")
        for column in ("Date", "Time", "Discipline", "Type", "Minutes"):
            detail.add_column(column)
        for w in sorted(workouts, key=lambda w: (w.scheduled_date, w.scheduled_time)):
            detail.add_row(str(w.scheduled_date), w.scheduled_time, w.discipline.value, w.workout_type.value, str(w.duration_minutes))
        console.print(detail)


@app.command()
def generate_week(
    user_id: str | None = typer.Option(None, "--user-id", help="User ID; omit to run for every user"),
    as_of: str | None = typer.Option(None, "--as-of", help="Reference date (YYYY-MM-DD), defaults to today"),
) -> None:
    """Generate the next week of workouts (weekly cadence job)."""
    reference = _parse_date(as_of) if as_of else None
    if user_id:
        with db_session.get_session() as session:
            results = [generate_next_week(session, user_id, as_of=reference)]
    else:
        results = generate_next_week_for_all(as_of=reference)

    table = Table(title="Weekly generation")
    for column in ("User", "Week", "Workouts", "Note"):
        table.add_column(column)
    for result in results:
        table.add_row(
            result.user_id,
            str(result.week_number or "-"),
            str(result.workouts_generated),
            result.reason or "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
