"""
Command-Line Interface for firecalc.

Purpose
-------
Runs FIRE calculations from profile files without writing Python code.

Commands
--------
- solve: Find the FIRE age for a profile and show/save the projection
- validate: Check a profile file against the input guards
- init: Create a sample profile file
- report: Summarize a saved result file
- info: Show version and dependency information

Example Usage
-------------
    # Create a sample profile and solve it
    $ firecalc init -o profile.json
    $ firecalc solve -p profile.json -o results/fire.json --csv results/fire.csv

    # Validate a profile exported from the web calculator
    $ firecalc validate profile.json

    # Summarize a saved result
    $ firecalc report -r results/fire.json --format detailed
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import AppSettings, SolverConfig
from .constants import DEFAULT_PROFILE
from .exceptions import FireCalcError
from .utils import format_currency, format_percentage

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    settings = AppSettings()
    level = "DEBUG" if verbose else settings.effective_log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="firecalc")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--verbose", "-v", is_flag=True, help="Log search progress (DEBUG)")
@click.pass_context
def main(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """
    firecalc - Financial Independence / Retire Early calculator.

    Finds the earliest age at which retiring is sustainable and projects
    net worth, income and expenses year by year in today's dollars.

    Use 'firecalc COMMAND --help' for command-specific help.
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = Console()


@main.command()
@click.option(
    "--profile", "-p",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to profile file (JSON)"
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save the result as JSON"
)
@click.option(
    "--csv", "csv_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Save the yearly projections as CSV"
)
@click.option(
    "--strategy",
    type=click.Choice(["binary", "linear"]),
    default="binary",
    help="FIRE age search strategy (default: binary)"
)
@click.option(
    "--safety-margin",
    type=float,
    default=None,
    help="Safety margin over break-even net worth (default: 1.2)"
)
@click.option(
    "--search-years",
    type=int,
    default=None,
    help="Years after the current age to search (default: 50)"
)
@click.option(
    "--no-validate",
    is_flag=True,
    help="Skip the input guards (expenses vs income, slowdown age)"
)
@click.option(
    "--detailed", "-d",
    is_flag=True,
    help="Print the full yearly projection table"
)
@click.pass_context
def solve(
    ctx: click.Context,
    profile: Path,
    output: Optional[Path],
    csv_path: Optional[Path],
    strategy: str,
    safety_margin: Optional[float],
    search_years: Optional[int],
    no_validate: bool,
    detailed: bool,
) -> None:
    """
    Find the FIRE age for a profile.

    Example:
        firecalc solve -p profile.json --csv projection.csv
    """
    console = ctx.obj["console"]
    quiet = ctx.obj.get("quiet", False)

    # Import here to avoid slow startup
    from pydantic import ValidationError as PydanticValidationError

    from .serialization import load_profile, save_result
    from .solver import FireAgeSolver
    from .summary import summarize
    from .validation import ensure_valid_profile

    try:
        fire_profile = load_profile(profile)
        logger.debug("Loaded profile from %s", profile)
        if not no_validate:
            ensure_valid_profile(fire_profile)
    except (FireCalcError, OSError) as e:
        _fail(f"loading profile: {e}")

    overrides = {"search_strategy": strategy}
    if safety_margin is not None:
        overrides["safety_margin"] = safety_margin
    if search_years is not None:
        overrides["search_years"] = search_years
    try:
        config = SolverConfig(**overrides)
    except PydanticValidationError as e:
        _fail(f"invalid solver options: {e}")

    result = FireAgeSolver(config).solve(fire_profile)
    summary = summarize(fire_profile, result)

    if quiet:
        click.echo(f"FIRE age: {result.fire_age}")
    else:
        table = Table(title="FIRE Result", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")

        status = "" if result.sustainable else " (not sustainable, search limit)"
        table.add_row("FIRE Age", f"{result.fire_age}{status}")
        table.add_row("Years to FIRE", f"{result.years_to_fire}")
        table.add_row("Starting Net Worth", format_currency(summary.starting_net_worth))
        table.add_row("Net Worth at FIRE", format_currency(summary.net_worth_at_fire))
        table.add_row("Required Net Worth", format_currency(result.required_net_worth))
        table.add_row("Expenses at FIRE", format_currency(result.projected_annual_expenses_at_fire))
        table.add_row("Final Net Worth", format_currency(result.final_net_worth))
        table.add_row("", "")
        table.add_row("Real Return", format_percentage(result.real_investment_return))
        table.add_row("Nominal Return", format_percentage(result.nominal_return_rate, decimals=2))
        table.add_row("Simulations Run", f"{result.iterations}")
        console.print(table)

        if detailed:
            console.print(_projection_table(result.to_frame(), result.fire_age))

    if output:
        save_result(result, output)
        if not quiet:
            click.echo(f"Result saved to {output}")

    if csv_path:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        result.to_frame().to_csv(csv_path)
        if not quiet:
            click.echo(f"Projections saved to {csv_path}")


def _projection_table(frame, fire_age: Optional[int] = None) -> Table:
    """Rich table of yearly projections (today's dollars)."""
    table = Table(title="Yearly Projections (today's dollars)")
    columns = ["net_worth", "annual_income", "annual_expenses", "investment_returns", "net_savings"]
    table.add_column("Age", justify="right")
    for col in columns:
        table.add_column(col.replace("_", " ").title(), justify="right")

    for age, row in frame.iterrows():
        style = "bold yellow" if fire_age is not None and int(age) == fire_age else None
        table.add_row(
            str(int(age)),
            *(format_currency(row[col]) for col in columns),
            style=style,
        )
    return table


@main.command()
@click.argument("profile", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, profile: Path) -> None:
    """
    Validate a profile file.

    Checks field types and ranges, expense streams, and the input guards
    (expenses must not exceed income, slowdown age after current age).

    Example:
        firecalc validate profile.json
    """
    console = ctx.obj["console"]
    quiet = ctx.obj.get("quiet", False)

    from .serialization import load_profile
    from .validation import validate_profile

    try:
        fire_profile = load_profile(profile)
    except (FireCalcError, OSError) as e:
        _fail(str(e))

    errors = validate_profile(fire_profile)
    if errors:
        table = Table(title="Profile Errors")
        table.add_column("Field", style="cyan")
        table.add_column("Problem", style="red")
        for field, message in errors.items():
            table.add_row(field, message)
        console.print(table)
        sys.exit(1)

    if not quiet:
        console.print(f"[green]Profile is valid: {profile}[/green]")


@main.command()
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=Path("profile.json"),
    help="Output file path (default: profile.json)"
)
@click.option(
    "--template", "-t",
    type=click.Choice(["basic", "family"]),
    default="basic",
    help="Profile template (default: basic)"
)
@click.pass_context
def init(ctx: click.Context, output: Path, template: str) -> None:
    """
    Create a sample profile file.

    Example:
        firecalc init -o my_profile.json --template family
    """
    console = ctx.obj["console"]
    quiet = ctx.obj.get("quiet", False)

    from .profile import Profile
    from .expenses import ExpenseStream
    from .serialization import save_profile

    sample = Profile(**DEFAULT_PROFILE)
    if template == "family":
        sample = sample.with_changes(
            annual_income=90_000.0,
            annual_expenses=50_000.0,
            additional_retirement_expenses=(
                ExpenseStream("travel", "Travel", 8_000.0, 60, 75),
            ),
            has_kids_expenses=True,
            kids_expenses=(
                ExpenseStream("kid1", "Child 1", 10_000.0, 30, 48),
                ExpenseStream("kid2", "Child 2", 10_000.0, 33, 51),
            ),
            has_parents_care=True,
            parents_care_expenses=(
                ExpenseStream("parents", "Parents care", 12_000.0, 55, 65),
            ),
        )

    save_profile(sample, output)
    if not quiet:
        console.print(f"[green]Created profile file: {output}[/green]")


@main.command()
@click.option(
    "--result", "-r",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to result file (JSON)"
)
@click.option(
    "--format", "-f",
    type=click.Choice(["summary", "detailed", "csv"]),
    default="summary",
    help="Output format (default: summary)"
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output file (for csv format)"
)
@click.pass_context
def report(
    ctx: click.Context,
    result: Path,
    format: str,
    output: Optional[Path],
) -> None:
    """
    Generate reports from a saved result.

    Example:
        firecalc report -r results/fire.json --format detailed
    """
    console = ctx.obj["console"]
    quiet = ctx.obj.get("quiet", False)

    from .serialization import load_result, projections_from_dict

    try:
        data = load_result(result)
    except (OSError, json.JSONDecodeError) as e:
        _fail(f"reading result: {e}")

    if format == "summary":
        if quiet:
            click.echo(f"FIRE age: {data.get('fireAge', 'N/A')}")
            return
        table = Table(title="FIRE Summary")
        table.add_column("Statistic", style="cyan")
        table.add_column("Value", style="green", justify="right")

        table.add_row("FIRE Age", f"{data.get('fireAge', 'N/A')}")
        table.add_row("Years to FIRE", f"{data.get('yearsToFire', 'N/A')}")
        table.add_row("Sustainable", "yes" if data.get("sustainable", False) else "no")
        table.add_row("Required Net Worth", format_currency(data.get("requiredNetWorth", 0.0)))
        table.add_row("Expenses at FIRE", format_currency(data.get("projectedAnnualExpensesAtFire", 0.0)))
        table.add_row("Final Net Worth", format_currency(data.get("finalNetWorth", 0.0)))
        table.add_row("Real Return", format_percentage(data.get("realInvestmentReturn", 0.0)))
        console.print(table)

    elif format == "detailed":
        records = data.get("yearlyProjections")
        if not records:
            _fail("no yearly projections found in result file")
        frame = projections_from_dict(records).rename(columns={
            "netWorth": "net_worth",
            "annualIncome": "annual_income",
            "annualExpenses": "annual_expenses",
            "investmentReturns": "investment_returns",
            "netSavings": "net_savings",
        })
        console.print(_projection_table(frame, data.get("fireAge")))

    elif format == "csv":
        records = data.get("yearlyProjections")
        if not records:
            _fail("no yearly projections found in result file")
        if not output:
            output = Path("report.csv")
        projections_from_dict(records).to_csv(output)
        if not quiet:
            click.echo(f"CSV report saved to {output}")


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers of firecalc and its dependencies.
    """
    console = ctx.obj["console"]

    from importlib.metadata import PackageNotFoundError, version

    info_lines = [
        f"firecalc Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
        f"Output Directory: {AppSettings().output_dir}",
    ]

    for name in ("numpy", "pandas", "pydantic", "pydantic-settings", "click", "rich"):
        try:
            info_lines.append(f"{name}: {version(name)}")
        except PackageNotFoundError:
            info_lines.append(f"{name}: not installed")

    console.print(Panel("\n".join(info_lines), title="System Information"))


if __name__ == "__main__":
    main()
