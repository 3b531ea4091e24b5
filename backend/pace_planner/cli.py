"""
CLI interface for the pace planner.

Usage:
    pace-planner distances
    pace-planner splits --distance 10K --time 50:00
    pace-planner splits --distance 42K --time 3:30:00 --strategy "Negative Split"
    pace-planner splits --distance 21K --time 1:45:00 --format json
"""

import json

import click

from pace_planner.config import settings
from pace_planner.features.pacing import (
    PacingPlanResponse,
    PacingService,
    PaceStrategy,
    split_count,
)
from pace_planner.shared.constants import RaceDistance
from pace_planner.shared.formatters import format_pace, parse_clock


def _parse_time(ctx, param, value):
    """click callback: clock text -> seconds."""
    if value is None:
        return None
    try:
        return parse_clock(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.group()
def cli():
    """Pace strategies and kilometer splits for a target finish time."""
    pass


@cli.command()
def distances():
    """List supported race distances."""
    click.echo(f"{'ID':>4} | {'Name':14} | {'Km':>7} | {'Splits':>6}")
    click.echo("-" * 42)
    for d in RaceDistance:
        click.echo(f"{d.value:>4} | {d.label:14} | {d.km:>7.3f} | {split_count(d.km):>6}")


@cli.command()
@click.option(
    "--distance",
    default=None,
    help="Distance id (5K, 10K, 21K, 42K) or kilometers (default from settings)",
)
@click.option(
    "--time",
    "target",
    default=None,
    callback=_parse_time,
    help="Target finish time as HH:MM:SS or MM:SS (default from settings)",
)
@click.option("--strategy", default=None, help="Show only this strategy (name or kind)")
@click.option(
    "--format",
    "output",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
def splits(distance, target, strategy, output):
    """Print pace strategies and splits for a target time."""
    if target is None:
        target = settings.default_target_seconds

    try:
        plan = PacingService.plan(target, distance or settings.default_distance)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--distance'")

    strategies = plan.strategies
    if strategy:
        selected = plan.get_strategy(strategy)
        if selected is None:
            names = ", ".join(s.name for s in plan.strategies) or "none"
            raise click.BadParameter(
                f"Unknown strategy: {strategy!r} (available: {names})",
                param_hint="'--strategy'",
            )
        strategies = [selected]

    if output == "json":
        response = PacingPlanResponse.from_plan(plan)
        # Round-trip through pydantic JSON so NaN/inf become null
        data = json.loads(response.model_dump_json())
        if strategy:
            data["strategies"] = [
                s for s in data["strategies"] if s["kind"] == strategies[0].kind.value
            ]
        click.echo(json.dumps(data, indent=2))
        return

    if plan.is_empty:
        click.echo("Target time and distance must both be greater than zero.")
        return

    click.echo(f"Target: {plan.target_time} over {plan.distance_km:g} km")
    click.echo(f"Base pace: {format_pace(plan.base_pace_seconds_per_km)} /km")
    click.echo(f"Animation speed: {plan.animation_speed:.1f}x")

    for s in strategies:
        click.echo()
        _echo_strategy(s)


def _echo_strategy(strategy: PaceStrategy) -> None:
    click.echo(f"{strategy.name} - {strategy.pace} /km")
    click.echo(f"  {strategy.description}")
    if not strategy.splits:
        click.echo("  (no whole-kilometer splits)")
        return
    for split in strategy.splits:
        click.echo(f"  KM {split.km:>3} | {split.time}")


if __name__ == "__main__":
    cli()
