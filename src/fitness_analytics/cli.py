#!/usr/bin/env python3
"""
fitness-analytics CLI.

Derived training and body metrics from an exported record snapshot.

Usage:
    fitness-analytics -s records.json dashboard --days 7
    fitness-analytics -s records.json loads --weeks 8
    fitness-analytics -s records.json records
    fitness-analytics -s records.json composition
    fitness-analytics -s records.json metabolism
    fitness-analytics -s records.json records --json
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis import (
    analyze_composition,
    build_dashboard,
    calc_weekly_loads,
    composition_label,
    compute_body_prs,
    find_personal_records,
    get_4week_avg_load,
)
from .analysis.training_load import TrainingStatus
from .config import get_settings
from .exceptions import FitnessAnalyticsError, ValidationError
from .logging_config import configure_logging
from .metrics import calc_bmi, bmi_category, calc_bmr, calc_tdee, resolve_profile
from .models.records import RecordSnapshot
from .snapshot import load_snapshot

logger = logging.getLogger(__name__)

console = Console()

STATUS_STYLES = {
    TrainingStatus.UNDERTRAINING: "yellow",
    TrainingStatus.OPTIMAL: "green",
    TrainingStatus.OVERTRAINING: "red",
}


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


def _parse_today(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD", field="today") from None


def cmd_dashboard(args, snapshot: RecordSnapshot):
    """Show the complete dashboard."""
    settings = get_settings()
    dashboard = build_dashboard(
        snapshot,
        today=_parse_today(args.today),
        days=args.days or settings.summary_days,
        default_body_weight_kg=settings.default_body_weight_kg,
    )
    if args.json:
        _print_json(dashboard.to_dict())
        return

    console.print()
    console.print(Panel(dashboard.summary or "Nothing logged yet.", title="This Week"))

    if dashboard.freshness_warning:
        console.print(f"[yellow]{dashboard.freshness_warning}[/yellow]")

    table = Table(title="Overview", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("4-week avg load", str(dashboard.avg_4week_load))
    if dashboard.weekly_loads:
        latest = dashboard.weekly_loads[-1]
        style = STATUS_STYLES[latest.status]
        table.add_row(
            f"Week of {latest.week_start}",
            f"{latest.total_load} AU [{style}]{latest.status.value}[/{style}]",
        )
    table.add_row("Composition", dashboard.composition_label)
    table.add_row("Weight trend", dashboard.weight_trend_label)
    table.add_row("Energy balance", dashboard.deficit_label)
    if dashboard.metabolism:
        table.add_row("BMR", f"{dashboard.metabolism.bmr} kcal")
        table.add_row("TDEE", f"{dashboard.metabolism.tdee} kcal")
    if dashboard.plateaued_exercises:
        table.add_row("Plateaued", ", ".join(dashboard.plateaued_exercises))
    console.print(table)

    if dashboard.goals:
        goals = Table(title="Goals", box=box.ROUNDED)
        goals.add_column("Goal", style="cyan")
        goals.add_column("Target", justify="right")
        goals.add_column("Best", justify="right")
        goals.add_column("Progress", justify="right")
        for g in dashboard.goals:
            best = "-" if g.best_value is None else f"{g.best_value:g} {g.unit}"
            pct = "-" if g.progress_pct is None else f"{g.progress_pct}%"
            if g.reached:
                pct = f"[green]{pct}[/green]"
            goals.add_row(g.name, f"{g.target_value:g} {g.unit}", best, pct)
        console.print(goals)
    console.print()


def cmd_loads(args, snapshot: RecordSnapshot):
    """Show weekly training load."""
    loads = calc_weekly_loads(snapshot.activities)
    shown = loads[-args.weeks:] if args.weeks > 0 else loads
    if args.json:
        _print_json({
            "weeks": [w.to_dict() for w in shown],
            "avg_4week_load": get_4week_avg_load(loads),
        })
        return

    console.print()
    if not loads:
        console.print("No activities logged.")
        console.print()
        return

    table = Table(title=f"Training Load (last {len(shown)} weeks)", box=box.ROUNDED)
    table.add_column("Week", style="cyan")
    table.add_column("Strength", justify="right")
    table.add_column("Cardio", justify="right")
    table.add_column("Total", justify="right", style="bold")
    table.add_column("Sessions", justify="right")
    table.add_column("Status")
    for w in shown:
        style = STATUS_STYLES[w.status]
        table.add_row(
            w.week_start,
            str(w.strength_load),
            str(w.cardio_load),
            str(w.total_load),
            str(w.session_count),
            f"[{style}]{w.status.value}[/{style}]",
        )
    console.print(table)
    console.print(f"4-week average: [bold]{get_4week_avg_load(loads)}[/bold] AU")
    console.print()


def cmd_records(args, snapshot: RecordSnapshot):
    """Show personal records."""
    records = find_personal_records(snapshot.sets, snapshot.exercise_map())
    body_prs = compute_body_prs(snapshot.body_metrics)
    if args.json:
        _print_json({
            "best_sets": [r.to_dict() for r in records],
            "body_prs": [pr.model_dump(mode="json") for pr in body_prs],
        })
        return

    console.print()
    table = Table(title="Personal Records (estimated 1RM)", box=box.ROUNDED)
    table.add_column("Exercise", style="cyan")
    table.add_column("Set", justify="right")
    table.add_column("1RM", justify="right", style="bold")
    table.add_column("Date")
    for r in records:
        table.add_row(r.exercise_name, f"{r.reps} x {r.weight:g}", f"{r.estimated_1rm:g}", r.achieved_on)
    console.print(table)

    if body_prs:
        body = Table(title="Body Records", box=box.ROUNDED)
        body.add_column("Record", style="cyan")
        body.add_column("Value", justify="right")
        body.add_column("Date")
        for pr in body_prs:
            body.add_row(pr.type.value.replace("_", " "), f"{pr.value:g} {pr.unit}", pr.date)
        console.print(body)
    console.print()


def cmd_composition(args, snapshot: RecordSnapshot):
    """Show body composition trend."""
    analysis = analyze_composition(snapshot.body_metrics)
    if args.json:
        _print_json({**analysis.to_dict(), "label": composition_label(analysis.trend)})
        return

    console.print()
    console.print(Panel(
        f"[bold]{composition_label(analysis.trend)}[/bold]\n"
        f"Weight: {analysis.weight_change_kg:+g} kg  "
        f"Body fat: {analysis.body_fat_change_pct:+g} %  "
        f"over {analysis.period_days} days",
        title="Body Composition",
    ))
    console.print()


def cmd_metabolism(args, snapshot: RecordSnapshot):
    """Show BMR and TDEE."""
    profile = resolve_profile(snapshot.body_metrics)
    if profile is None:
        raise ValidationError(
            "Weight, height, age and gender must each be logged at least once",
            field="body_metrics",
        )
    newest = max(snapshot.body_metrics, key=lambda m: m.date)
    result = calc_tdee(calc_bmr(profile), args.workout_calories, newest.steps)
    bmi = calc_bmi(profile.weight, profile.height)
    if args.json:
        _print_json({"profile": profile.to_dict(), **result.to_dict(), "bmi": bmi})
        return

    console.print()
    table = Table(title="Metabolism", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("BMR", f"{result.bmr} kcal/day")
    table.add_row("Workouts", f"{result.workout_calories} kcal/day")
    table.add_row("Steps", f"{result.steps_calories} kcal/day")
    table.add_row("TDEE", f"[bold]{result.tdee}[/bold] kcal/day")
    table.add_row("BMI", f"{bmi:g} ({bmi_category(bmi)})")
    console.print(table)
    console.print()


COMMANDS = {
    "dashboard": cmd_dashboard,
    "loads": cmd_loads,
    "records": cmd_records,
    "composition": cmd_composition,
    "metabolism": cmd_metabolism,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fitness-analytics",
        description="fitness-analytics - derived metrics from logged workouts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fitness-analytics -s records.json dashboard --days 7
  fitness-analytics -s records.json loads --weeks 8
  fitness-analytics -s records.json records --json
        """,
    )
    parser.add_argument("--snapshot", "-s", help="Path to a JSON record snapshot")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print raw JSON instead of tables")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    dashboard_p = subparsers.add_parser("dashboard", parents=[common], help="Show the complete dashboard")
    dashboard_p.add_argument("--days", "-d", type=int, help="Summary window in days")
    dashboard_p.add_argument("--today", help="Reference day (YYYY-MM-DD)")

    loads_p = subparsers.add_parser("loads", parents=[common], help="Show weekly training load")
    loads_p.add_argument("--weeks", "-w", type=int, default=8, help="Number of weeks to show")

    subparsers.add_parser("records", parents=[common], help="Show personal records")
    subparsers.add_parser("composition", parents=[common], help="Show body composition trend")

    metabolism_p = subparsers.add_parser("metabolism", parents=[common], help="Show BMR and TDEE")
    metabolism_p.add_argument(
        "--workout-calories", type=float, default=0, help="Daily workout kcal"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    snapshot_path = args.snapshot or settings.snapshot_path
    if not snapshot_path:
        console.print("[red]No snapshot given. Use --snapshot or set FITNESS_SNAPSHOT_PATH.[/red]")
        return 1

    try:
        snapshot = load_snapshot(snapshot_path)
        COMMANDS[args.command](args, snapshot)
    except FitnessAnalyticsError as e:
        logger.debug("Command %s failed: %r", args.command, e)
        console.print(f"[red]Error: {e.message}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
