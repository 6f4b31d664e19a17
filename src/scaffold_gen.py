"""stage-scaffold: generate a given/when/then scenario test class from a feature file."""

from __future__ import annotations

import argparse
import sys
from io import StringIO
from pathlib import Path
from typing import TextIO

from gherkin.errors import ParserError

from scaffold_feature import Document, Scenario, load_feature
from scaffold_names import escape_string_literal, is_legal_bare_identifier, to_method_identifier, to_type_identifier
from scaffold_steps import INDENT, build_chain, render_body

PROG = "stage-scaffold"
DEFAULT_BASE_CLASS = "ScenarioTest<GivenState, WhenAction, ThenOutcome>"
CLASS_SUFFIX = "Test"
TEST_ANNOTATION = "@Test"
DESCRIPTION_ANNOTATION = "@Description"


def _scenario_lines(scenario: Scenario) -> list[str]:
    lines = ["", INDENT + TEST_ANNOTATION]
    if not is_legal_bare_identifier(scenario.description):
        lines.append(f'{INDENT}{DESCRIPTION_ANNOTATION}("{escape_string_literal(scenario.description)}")')
    lines.append(f"{INDENT}public void {to_method_identifier(scenario.name)}() {{")
    lines.extend(render_body(build_chain(scenario.steps), INDENT * 2))
    lines.append(INDENT + "}")
    return lines


def generate(
    document: Document,
    out: TextIO,
    *,
    base_class: str = DEFAULT_BASE_CLASS,
    class_suffix: str = CLASS_SUFFIX,
) -> None:
    """Write one test class for ``document`` to ``out``, one method per scenario.

    Output is written line by line as it is produced; if ``out`` fails midway
    the error propagates and whatever was written stays written.
    """
    out.write(f"public class {to_type_identifier(document.title)}{class_suffix} extends\n")
    out.write(f"{INDENT * 2}{base_class} {{\n")
    for scenario in document.scenarios:
        for line in _scenario_lines(scenario):
            out.write(line + "\n")
    out.write("}\n")


def generate_source(document: Document, **options: str) -> str:
    """Like ``generate``, but return the class source as a string."""
    buffer = StringIO()
    generate(document, buffer, **options)
    return buffer.getvalue()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate a given/when/then scenario test class skeleton from a feature file.",
    )
    parser.add_argument("feature", help="Path to the .feature file.")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the generated class to this file instead of stdout.",
    )
    parser.add_argument(
        "--base-class",
        default=DEFAULT_BASE_CLASS,
        help=f"Class the generated test extends (default: '{DEFAULT_BASE_CLASS}').",
    )
    parser.add_argument(
        "--class-suffix",
        default=CLASS_SUFFIX,
        help=f"Suffix appended to the generated class name (default: '{CLASS_SUFFIX}').",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the stage-scaffold command."""
    args = parse_args(argv)

    try:
        document = load_feature(Path(args.feature))
    except OSError as exc:
        print(f"{PROG}: cannot read '{args.feature}': {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ParserError as exc:
        print(f"{PROG}: cannot parse '{args.feature}':\n{exc}", file=sys.stderr)
        return 1

    options = {"base_class": args.base_class, "class_suffix": args.class_suffix}
    if args.output:
        with open(args.output, "w", encoding="utf-8") as out:
            generate(document, out, **options)
        return 0

    try:
        generate(document, sys.stdout, **options)
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
