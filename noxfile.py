"""Nox sessions for CI and local development."""

from __future__ import annotations

import nox

nox.options.default_venv_backend = "uv"
nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ["tests", "lint", "format_check"]

PYTHON_VERSIONS = ["3.10", "3.11", "3.12", "3.13"]
SAMPLE_FEATURE = "examples/user_login.feature"


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the unit and approval test suites."""
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)


@nox.session
def sample(session: nox.Session) -> None:
    """Generate the scenario class for the bundled sample feature."""
    session.install(".")
    session.run("stage-scaffold", *(session.posargs or [SAMPLE_FEATURE]))


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff linter."""
    session.install("ruff")
    session.run("ruff", "check", "src", "tests", "noxfile.py")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check code formatting with ruff."""
    session.install("ruff")
    session.run("ruff", "format", "--check", "src", "tests", "noxfile.py")
