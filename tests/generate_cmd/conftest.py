"""Pytest configuration for stage-scaffold e2e tests.

Approved/received files live in approved_files/ (see approvaltests_config.json);
SCENARIOS-generate.md is regenerated from them after each test run.
"""

from __future__ import annotations

from pathlib import Path

from tests.scenario_report import generate_report

SUITE_DIR = Path(__file__).parent
APPROVED_DIR = SUITE_DIR / "approved_files"
SCENARIOS_MD = SUITE_DIR.parents[1] / "SCENARIOS-generate.md"


def pytest_sessionfinish(session, exitstatus):
    generate_report(
        title="Stage-Scaffold Scenarios",
        approved_dir=APPROVED_DIR,
        output_path=SCENARIOS_MD,
    )
