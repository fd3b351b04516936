#!/usr/bin/env python3
"""Initialize database with reference data"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from staffing.exceptions import StaffingError
from staffing.reference import load_reference_file, SQLReferenceProvider
from staffing.utils import logger, config


def main():
    parser = argparse.ArgumentParser(description="Create and seed the reference tables")
    parser.add_argument("--database-url", default=None, help="Database URL (defaults to DATABASE_URL)")
    parser.add_argument("--data", default=None, help="Reference data YAML file")
    parser.add_argument("--append", action="store_true", help="Keep existing rows")
    args = parser.parse_args()

    try:
        reference = load_reference_file(args.data or config.reference_data_path)
        provider = SQLReferenceProvider(args.database_url)
        provider.create_schema()
        provider.seed(reference, replace=not args.append)
        loaded = provider.load()
    except StaffingError as e:
        logger.error(f"Database initialization failed: {e}")
        return 1

    logger.info(f"✓ Database ready: {loaded.summary()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
