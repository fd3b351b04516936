#!/usr/bin/env python3
"""Main entry point for the deployment staffing matcher"""
from rich.console import Console
from rich.table import Table

from staffing.engine import StaffingMatcher
from staffing.models import Demand, MatchOutput
from staffing.reference import load_reference_file
from staffing.utils import logger, config, monitor

console = Console()


def display_results(output: MatchOutput, title: str = None):
    """Display ranked candidates in a table"""
    demand = output.demand
    table = Table(title=title or (
        f"{demand.headcount} x {demand.role} -> {demand.destination_country} "
        f"({demand.duration_months} months)"
    ))
    table.add_column("Rank", style="cyan", width=6)
    table.add_column("Candidate", style="magenta")
    table.add_column("Visa", style="green")
    table.add_column("Cost", style="yellow", justify="right")
    table.add_column("CO2", justify="right")
    table.add_column("Speed/Cost/Comp", width=16)
    table.add_column("Score", style="bold", width=6)
    table.add_column("Risks", style="red")

    for result in output.results:
        scores = result.scores
        table.add_row(
            f"#{result.rank}",
            f"{result.first_name} {result.last_name}\n{result.nationality} • from {result.current_location}",
            f"{result.visa_type}\n{result.wait_days} days",
            f"€{result.estimated_cost:,.0f}",
            f"{scores.carbon_kg:,.0f} kg" if scores.carbon_kg else "No flight",
            f"{scores.speed_score}/{scores.cost_score}/{scores.compliance_score}",
            str(result.final_score),
            "\n".join(result.risks),
        )

    console.print(table)


def main():
    """Demo workflow on the bundled reference data"""
    console.print("[bold blue]Deployment Staffing Matcher[/bold blue]\n")

    logger.info("Loading reference snapshot")
    reference = load_reference_file(config.reference_data_path)
    matcher = StaffingMatcher(reference)

    demands = [
        Demand(destination_country="Brazil", role="Lead Engineer", headcount=2, duration_months=3),
        Demand(destination_country="USA", role="Senior Technician", headcount=2, duration_months=6),
        Demand(destination_country="NewEngland", role="Lead Engineer", headcount=3, duration_months=12),
    ]

    for preset in config.weight_presets:
        console.print(f"\n[cyan]Preset: {preset}[/cyan]")
        for demand in demands:
            display_results(matcher.match_preset(demand, preset))

    console.print(f"\n[green]✓[/green] Performance: {monitor.get_report()}")


if __name__ == "__main__":
    main()
