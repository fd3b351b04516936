"""SQL-backed reference data provider"""
import json
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .snapshot import ReferenceData
from ..exceptions import DataUnavailableError
from ..models import Candidate, VisaRule
from ..utils import config, logger


SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS employees (
        id TEXT PRIMARY KEY,
        seq INTEGER NOT NULL,
        first_name TEXT NOT NULL,
        last_name TEXT NOT NULL,
        nationality TEXT NOT NULL,
        role TEXT NOT NULL,
        current_location TEXT NOT NULL,
        base_compensation NUMERIC NOT NULL,
        skills TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS visa_rules (
        origin_country TEXT NOT NULL,
        destination_country TEXT NOT NULL,
        visa_type TEXT NOT NULL,
        processing_time_days INTEGER NOT NULL,
        notes TEXT,
        PRIMARY KEY (origin_country, destination_country)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS flight_costs (
        origin_country TEXT NOT NULL,
        destination_country TEXT NOT NULL,
        cost NUMERIC NOT NULL,
        PRIMARY KEY (origin_country, destination_country)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS carbon_footprint (
        origin_country TEXT NOT NULL,
        destination_country TEXT NOT NULL,
        kg_co2 NUMERIC NOT NULL,
        PRIMARY KEY (origin_country, destination_country)
    )
    """,
]


def _parse_skills(value: Any) -> List[str]:
    """Skills are stored as a JSON array or a comma separated string"""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(s) for s in value]
    value = str(value).strip()
    if value.startswith("["):
        return [str(s) for s in json.loads(value)]
    return [s.strip() for s in value.split(",") if s.strip()]


class SQLReferenceProvider:
    """Read roster and lookup tables into a fresh snapshot"""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        self.database_url = database_url or config.database_url
        if engine is None and not self.database_url:
            raise DataUnavailableError("No database URL configured (set DATABASE_URL)")
        self.engine = engine or create_engine(self.database_url, pool_pre_ping=True)

    def create_schema(self):
        """Create reference tables if they do not exist"""
        try:
            with self.engine.begin() as conn:
                for statement in SCHEMA_STATEMENTS:
                    conn.execute(text(statement))
        except SQLAlchemyError as e:
            raise DataUnavailableError(f"Failed to create reference schema: {e}") from e
        logger.info("✓ Reference schema ready")

    def seed(self, reference: ReferenceData, replace: bool = True):
        """Write a snapshot into the reference tables"""
        employees = [
            {
                "id": c.id or f"e{i + 1}",
                "seq": i,
                "first_name": c.first_name,
                "last_name": c.last_name,
                "nationality": c.nationality,
                "role": c.role,
                "current_location": c.current_location,
                "base_compensation": c.base_compensation,
                "skills": json.dumps(c.skills),
            }
            for i, c in enumerate(reference.roster)
        ]
        visa_rules = [
            {
                "origin": origin,
                "destination": destination,
                "visa_type": rule.visa_type,
                "days": rule.wait_days,
                "notes": rule.notes,
            }
            for (origin, destination), rule in reference.visa_rules.items()
        ]
        flights = [
            {"origin": origin, "destination": destination, "value": cost}
            for (origin, destination), cost in reference.flight_costs.items()
        ]
        carbon = [
            {"origin": origin, "destination": destination, "value": kg}
            for (origin, destination), kg in reference.carbon_footprint.items()
        ]

        try:
            with self.engine.begin() as conn:
                if replace:
                    for table in ("employees", "visa_rules", "flight_costs", "carbon_footprint"):
                        conn.execute(text(f"DELETE FROM {table}"))
                if employees:
                    conn.execute(text("""
                        INSERT INTO employees
                            (id, seq, first_name, last_name, nationality, role,
                             current_location, base_compensation, skills)
                        VALUES
                            (:id, :seq, :first_name, :last_name, :nationality, :role,
                             :current_location, :base_compensation, :skills)
                    """), employees)
                if visa_rules:
                    conn.execute(text("""
                        INSERT INTO visa_rules
                            (origin_country, destination_country, visa_type, processing_time_days, notes)
                        VALUES (:origin, :destination, :visa_type, :days, :notes)
                    """), visa_rules)
                if flights:
                    conn.execute(text("""
                        INSERT INTO flight_costs (origin_country, destination_country, cost)
                        VALUES (:origin, :destination, :value)
                    """), flights)
                if carbon:
                    conn.execute(text("""
                        INSERT INTO carbon_footprint (origin_country, destination_country, kg_co2)
                        VALUES (:origin, :destination, :value)
                    """), carbon)
        except SQLAlchemyError as e:
            raise DataUnavailableError(f"Failed to seed reference data: {e}") from e

        logger.info(f"✓ Seeded reference tables: {reference.summary()}")

    def load(self) -> ReferenceData:
        """Read all reference tables into a new snapshot"""
        try:
            with self.engine.connect() as conn:
                employee_rows = conn.execute(text("""
                    SELECT id, first_name, last_name, nationality, role,
                           current_location, base_compensation, skills
                    FROM employees
                    ORDER BY seq
                """)).mappings().all()
                visa_rows = conn.execute(text("""
                    SELECT origin_country, destination_country, visa_type, processing_time_days, notes
                    FROM visa_rules
                """)).mappings().all()
                flight_rows = conn.execute(text(
                    "SELECT origin_country, destination_country, cost FROM flight_costs"
                )).mappings().all()
                carbon_rows = conn.execute(text(
                    "SELECT origin_country, destination_country, kg_co2 FROM carbon_footprint"
                )).mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Reference data query failed: {e}")
            raise DataUnavailableError(f"Reference data unavailable: {e}") from e

        try:
            roster = [self._candidate_from_row(row) for row in employee_rows]
            visa_rules = {
                (row["origin_country"], row["destination_country"]): VisaRule(
                    visa_type=row["visa_type"],
                    wait_days=int(row["processing_time_days"]),
                    notes=row["notes"],
                )
                for row in visa_rows
            }
        except (ValueError, TypeError) as e:
            raise DataUnavailableError(f"Invalid reference rows: {e}") from e

        reference = ReferenceData(
            roster=roster,
            visa_rules=visa_rules,
            flight_costs={
                (row["origin_country"], row["destination_country"]): float(row["cost"])
                for row in flight_rows
            },
            carbon_footprint={
                (row["origin_country"], row["destination_country"]): float(row["kg_co2"])
                for row in carbon_rows
            },
        )
        logger.info(f"Loaded reference snapshot from database: {reference.summary()}")
        return reference

    @staticmethod
    def _candidate_from_row(row: Dict[str, Any]) -> Candidate:
        return Candidate(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            nationality=row["nationality"],
            role=row["role"],
            current_location=row["current_location"],
            base_compensation=float(row["base_compensation"]),
            skills=_parse_skills(row["skills"]),
        )
