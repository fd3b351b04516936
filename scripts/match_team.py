#!/usr/bin/env python3
"""Rank candidates for a deployment request"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from staffing.engine import StaffingMatcher, resolve_preset
from staffing.exceptions import StaffingError
from staffing.models import WeightInput
from staffing.reference import load_reference_file, SQLReferenceProvider
from staffing.utils import logger, config


def build_weights(args):
    """Explicit sliders win over a preset"""
    if any(value is not None for value in (args.speed, args.cost, args.compliance)):
        return WeightInput(
            speed=args.speed or 0,
            cost=args.cost or 0,
            compliance=args.compliance or 0,
        )
    return resolve_preset(args.preset or config.default_preset)


def main():
    parser = argparse.ArgumentParser(description="Rank candidates for a deployment request")
    parser.add_argument("--destination", required=True, help="Destination country")
    parser.add_argument("--role", required=True, help="Required role (exact match)")
    parser.add_argument("--headcount", type=int, default=1, help="Number of people needed")
    parser.add_argument("--duration", type=int, required=True, help="Assignment duration in months")
    parser.add_argument("--skills", nargs="*", default=[], help="Skills to report on (not scored)")
    parser.add_argument("--preset", choices=sorted(config.weight_presets), help="Weight preset")
    parser.add_argument("--speed", type=float, help="Speed weight (0-100)")
    parser.add_argument("--cost", type=float, help="Cost weight (0-100)")
    parser.add_argument("--compliance", type=float, help="Compliance weight (0-100)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--data", help="Reference data YAML file")
    source.add_argument("--database-url", help="Load reference data from a database")
    parser.add_argument("--output", help="Output JSON file")
    args = parser.parse_args()

    try:
        if args.database_url:
            reference = SQLReferenceProvider(args.database_url).load()
        else:
            reference = load_reference_file(args.data or config.reference_data_path)

        matcher = StaffingMatcher(reference)
        output = matcher.match(
            {
                "destination_country": args.destination,
                "role": args.role,
                "headcount": args.headcount,
                "duration_months": args.duration,
                "required_skills": args.skills,
            },
            build_weights(args),
        )
    except StaffingError as e:
        logger.error(f"Matching failed: {e}")
        return 1

    if args.output:
        with open(args.output, 'w') as f:
            f.write(output.model_dump_json(indent=2))
        logger.info(f"✓ Saved {len(output.results)} results to {args.output}")
    else:
        print(json.dumps(output.model_dump(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
