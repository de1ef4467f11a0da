"""
Command-line interface for FinPlanLab.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from finplanlab import __version__
from finplanlab.core.catalog_loader import load_catalog
from finplanlab.core.utils import date_string_to_epoch_day, epoch_day_to_date_string

EXAMPLE_CATALOG = {
    "version": 1,
    "plan": {
        "id": "demo",
        "name": "CLI Demo Plan",
        "birthDate": "1990-06-15",
        "retirementAge": 65,
    },
    "entities": [
        {
            "id": "checking",
            "name": "Main Checking",
            "templateKey": "checking",
            "data": {"growthRate": 0.0},
            "ledgerEntries": [{"date": "2024-01-01", "amount": 5000.0}],
        },
        {
            "id": "savings",
            "name": "High Yield Savings",
            "templateKey": "savings",
            "data": {"growthRate": 0.04},
            "ledgerEntries": [{"date": "2024-01-01", "amount": 20000.0}],
        },
        {
            "id": "index_fund",
            "name": "Index Fund",
            "templateKey": "etf",
            "data": {"symbol": "VTI", "growthRate": 0.07},
            "ledgerEntries": [
                {"date": "2024-01-01", "shareQuantity": 100.0, "sharePrice": 230.0}
            ],
        },
        {
            "id": "job",
            "name": "Job",
            "templateKey": "job",
            "data": {
                "targetEntityId": "checking",
                "growthRate": 0.03,
                "schedule": {
                    "type": "monthly",
                    "daysOfMonth": [1, 15],
                    "startDate": "2024-01-01",
                },
            },
            "ledgerEntries": [{"date": "2024-01-01", "amount": 2500.0}],
        },
        {
            "id": "rent",
            "name": "Rent",
            "templateKey": "bills",
            "data": {
                "sourceEntityId": "checking",
                "growthRate": 0.02,
                "schedule": {
                    "type": "monthly",
                    "daysOfMonth": [1],
                    "startDate": "2024-01-01",
                },
            },
            "ledgerEntries": [{"date": "2024-01-01", "amount": 1800.0}],
        },
        {
            "id": "car_loan",
            "name": "Car Loan",
            "templateKey": "auto-loan",
            "data": {
                "paymentSourceEntityId": "checking",
                "interestRate": 0.06,
                "paymentAmount": 450.0,
                "paymentSchedule": {
                    "type": "monthly",
                    "daysOfMonth": [10],
                    "startDate": "2024-01-10",
                },
            },
            "ledgerEntries": [{"date": "2024-01-01", "amount": -18000.0}],
        },
    ],
}


def _today_day(args) -> int | None:
    return date_string_to_epoch_day(args.today) if args.today else None


def cmd_example(_) -> int:
    """Print a minimal working plan catalog as JSON."""
    json.dump(EXAMPLE_CATALOG, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def cmd_run(args) -> int:
    """Run a plan catalog and print its year-end data points."""
    try:
        plan = load_catalog(args.input).build_plan(today_day=_today_day(args))
        plan.simulate()

        points = plan.get_data_points_for_all_years()
        if args.json:
            output = {
                "plan": plan.to_dict(),
                "startDay": plan.get_simulation_start_day(),
                "endDay": plan.get_simulation_end_day(),
                "dataPoints": [
                    {
                        "day": day,
                        "date": epoch_day_to_date_string(day),
                        "assets": point.assets,
                        "debt": point.debt,
                        "netWorth": point.net_worth,
                    }
                    for day, point in sorted(points.items())
                ],
            }
            json.dump(output, sys.stdout, indent=2)
            sys.stdout.write("\n")
        else:
            print(
                f"{plan.name}: {len(plan.entities)} entities, "
                f"{plan.projection_years} projection years"
            )
            print(f"{'date':<12}{'assets':>16}{'debt':>16}{'net worth':>16}")
            for day, point in sorted(points.items()):
                print(
                    f"{epoch_day_to_date_string(day):<12}"
                    f"{point.assets:>16,.2f}{point.debt:>16,.2f}{point.net_worth:>16,.2f}"
                )
        return 0

    except Exception as e:
        print(f"Error running plan: {e}", file=sys.stderr)
        return 1


def cmd_entity(args) -> int:
    """Print the snapshot history of one entity."""
    try:
        plan = load_catalog(args.input).build_plan(today_day=_today_day(args))
        plan.simulate()

        if not any(e.id == args.id for e in plan.entities):
            print(f"Unknown entity: {args.id}", file=sys.stderr)
            return 1

        snapshots = plan.simulation.get_snapshots(args.id)
        if args.json:
            output = [
                {"date": epoch_day_to_date_string(s.day), "value": s.value, **asdict(s)}
                for s in snapshots
            ]
            json.dump(output, sys.stdout, indent=2)
            sys.stdout.write("\n")
        else:
            for s in snapshots:
                print(f"{epoch_day_to_date_string(s.day):<12}{s.value:>16,.2f}")
        return 0

    except Exception as e:
        print(f"Error reading entity: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="finplanlab", description="FinPlanLab - Financial plan projection engine"
    )

    # Version argument
    parser.add_argument(
        "--version", action="version", version=f"FinPlanLab {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    # Example command
    example_parser = subparsers.add_parser(
        "example", help="Print a minimal working plan catalog"
    )
    example_parser.set_defaults(func=cmd_example)

    # Run command
    run_parser = subparsers.add_parser(
        "run", help="Run a plan catalog and print year-end figures"
    )
    run_parser.add_argument(
        "-i", "--input", required=True, help="Input plan catalog (YAML or JSON)"
    )
    run_parser.add_argument(
        "--today", help="Date treated as today (YYYY-MM-DD, default: current date)"
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    run_parser.set_defaults(func=cmd_run)

    # Entity command
    entity_parser = subparsers.add_parser(
        "entity", help="Print the simulated history of one entity"
    )
    entity_parser.add_argument(
        "-i", "--input", required=True, help="Input plan catalog (YAML or JSON)"
    )
    entity_parser.add_argument("--id", required=True, help="Entity id")
    entity_parser.add_argument(
        "--today", help="Date treated as today (YYYY-MM-DD, default: current date)"
    )
    entity_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    entity_parser.set_defaults(func=cmd_entity)

    # Parse arguments and execute
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
