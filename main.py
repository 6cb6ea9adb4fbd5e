"""Simple CLI entry to exercise the insurance plan advisor."""

import argparse
import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

from plan_advisor import PlanServiceError, build_service, get_settings
from plan_advisor.models import comparison_to_dict, plan_to_dict, receipt_to_dict


DEMO_USER = {
    "name": "Demo User",
    "email": "demo@example.com",
    "phone": "9876543210",
    "age": 35,
}


def load_json(path: Optional[Path], default: Dict[str, Any]) -> Dict[str, Any]:
    if path is None:
        return dict(default)
    return json.loads(path.read_text())


async def run(args: argparse.Namespace) -> Any:
    settings = get_settings()
    if args.fast:
        settings = replace(settings, simulate_latency=False)
    service = build_service(settings)

    if args.command == "plans":
        plans = await service.fetch_plans(load_json(args.preferences, {}))
        return [plan_to_dict(plan) for plan in plans]
    if args.command == "details":
        return plan_to_dict(await service.fetch_plan_details(args.plan_id, args.provider))
    if args.command == "compare":
        return comparison_to_dict(await service.compare_plans(args.selected, args.size))
    if args.command == "providers":
        return [info.__dict__ for info in await service.list_providers()]
    if args.command == "submit":
        plan = await service.fetch_plan_details(args.plan_id)
        receipt = await service.submit_selection(load_json(args.user, DEMO_USER), plan_to_dict(plan))
        return receipt_to_dict(receipt)
    raise ValueError(f"Unknown command: {args.command}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Browse and select health insurance plans.")
    parser.add_argument("--fast", action="store_true", help="Skip the simulated network latency")
    parser.add_argument("--verbose", action="store_true", help="Log service calls to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    plans = sub.add_parser("plans", help="List recommended plans")
    plans.add_argument("--preferences", type=Path, help="JSON file with questionnaire answers")

    details = sub.add_parser("details", help="Show one plan with derived details")
    details.add_argument("plan_id")
    details.add_argument("--provider", help="Upstream provider id, e.g. hdfc")

    compare = sub.add_parser("compare", help="Compare plans side by side")
    compare.add_argument("--selected", help="Plan id to keep in the first column")
    compare.add_argument("--size", type=int, default=3)

    sub.add_parser("providers", help="List insurance providers")

    submit = sub.add_parser("submit", help="Submit a plan selection")
    submit.add_argument("plan_id")
    submit.add_argument("--user", type=Path, help="JSON file with the applicant's details")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = asyncio.run(run(args))
    except PlanServiceError as exc:
        parser.exit(1, f"{exc.message}\n")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
