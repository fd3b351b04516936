"""Shared fixtures for matcher tests"""
from pathlib import Path

import pytest

from staffing.engine import StaffingMatcher, DEFAULT_POLICY
from staffing.models import VisaRule
from staffing.reference import ReferenceData, load_reference_file
from staffing.utils import monitor

from tests.factories import make_candidate

REPO_ROOT = Path(__file__).resolve().parents[1]
BUNDLED_DATA = REPO_ROOT / "data" / "reference_data.yaml"


@pytest.fixture
def roster():
    return [
        make_candidate("Juho", "Finland", "Finland", compensation=240000, skills=["Wartsila 31", "Safety Lead"]),
        make_candidate("Rahul", "India", "India", role="Senior Technician", compensation=54000),
        make_candidate("Matti", "Finland", "Brazil", role="Senior Technician", compensation=66000),
        make_candidate("Carla", "Chile", "Chile", compensation=120000),
    ]


@pytest.fixture
def reference(roster):
    return ReferenceData(
        roster=roster,
        visa_rules={
            ("Finland", "Brazil"): VisaRule(visa_type="Visa Waiver (90 days)", wait_days=0),
            ("India", "USA"): VisaRule(visa_type="B1/B2 Interview Required", wait_days=60),
            ("India", "Brazil"): VisaRule(visa_type="Consular Visa Required", wait_days=25),
            ("Finland", "USA"): VisaRule(visa_type="ESTA Waiver", wait_days=3),
        },
        flight_costs={
            ("Finland", "Brazil"): 1200,
            ("India", "USA"): 1100,
            ("Brazil", "Brazil"): 0,
        },
        carbon_footprint={
            ("Finland", "Brazil"): 1850,
        },
    )


@pytest.fixture
def bundled_reference():
    return load_reference_file(BUNDLED_DATA)


@pytest.fixture
def matcher(reference):
    return StaffingMatcher(reference, policy=DEFAULT_POLICY)


@pytest.fixture(autouse=True)
def reset_monitor():
    monitor.reset()
    yield
    monitor.reset()
