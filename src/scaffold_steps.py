"""stage-scaffold: turn scenario steps into fluent given/when/then call chains."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from scaffold_names import PLACEHOLDER, to_step_identifier
from scaffold_feature import Step

INDENT = "    "
NUMBER_RE = re.compile(r"[0-9]+[.,]?[0-9]*")
CONTINUATION = "and"
# Gherkin's bullet keyword reads as "and" in a fluent chain.
KEYWORD_ALIASES = {"*": CONTINUATION}


class StepCall(NamedTuple):
    method_name: str
    arguments: list[str]

    def render(self) -> str:
        return f"{self.method_name}({', '.join(self.arguments)})"


def extract_arguments(text: str) -> list[str]:
    """Numeric literals in ``text``, left to right, exactly as written ('2,5' stays '2,5')."""
    return NUMBER_RE.findall(text)


def parameterize(text: str) -> StepCall:
    """Split step text into a method name and its literal arguments.

    Every number becomes the placeholder in the name, so
    'I have 3 apples and 2,5 kg of oranges' gives
    ``StepCall('I_have_$_apples_and_$_kg_of_oranges', ['3', '2,5'])``.
    """
    arguments = extract_arguments(text)
    method_name = to_step_identifier(NUMBER_RE.sub(PLACEHOLDER, text))
    return StepCall(method_name, arguments)


def normalize_keyword(keyword: str) -> str:
    keyword = keyword.strip().lower()
    return KEYWORD_ALIASES.get(keyword, keyword)


def render_step(step: Step) -> str:
    """'Given ', 'a user' → 'given().a_user()'."""
    return f"{normalize_keyword(step.keyword)}().{parameterize(step.text).render()}"


def build_chain(steps: Iterable[Step]) -> list[list[str]]:
    """Group rendered step calls into statements.

    An 'and' step extends the statement before it; any other keyword starts a
    new one. The first step always starts a statement.
    """
    statements: list[list[str]] = []
    for step in steps:
        call = render_step(step)
        if statements and normalize_keyword(step.keyword) == CONTINUATION:
            statements[-1].append(call)
        else:
            statements.append([call])
    return statements


def render_body(statements: list[list[str]], indent: str = INDENT * 2) -> Iterator[str]:
    """Yield method body lines: chained calls end with '.', statements end with ';'.

    Continuation calls sit one level deeper than the statement's first call.
    Statements are separated by a blank line. No statements, no lines.
    """
    for index, calls in enumerate(statements):
        if index:
            yield ""
        for position, call in enumerate(calls):
            prefix = indent if position == 0 else indent + INDENT
            suffix = ";" if position == len(calls) - 1 else "."
            yield f"{prefix}{call}{suffix}"
