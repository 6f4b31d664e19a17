"""stage-scaffold: read feature files into an immutable scenario document.

Parsing is delegated to gherkin-official; this module only reshapes its
dict-based AST. Backgrounds, rules and example tables are not part of the
document and are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gherkin.parser import Parser
from gherkin.token_scanner import TokenScanner


@dataclass(frozen=True)
class Step:
    keyword: str
    text: str


@dataclass(frozen=True)
class Scenario:
    name: str
    steps: tuple[Step, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class Document:
    description: str
    scenarios: tuple[Scenario, ...] = ()
    name: str = ""

    @property
    def title(self) -> str:
        """Text the generated class is named after: the description, else the feature name."""
        return self.description.strip() or self.name.strip()


def _scenario_from_ast(node: dict) -> Scenario:
    steps = tuple(Step(keyword=step["keyword"], text=step["text"]) for step in node.get("steps", []))
    # Multi-line descriptions are folded into one line so they fit a string literal.
    description = " ".join((node.get("description") or "").split()) or None
    return Scenario(name=node.get("name", ""), steps=steps, description=description)


def parse_feature(text: str) -> Document:
    """Parse feature-file source into a Document.

    Raises gherkin.errors.ParserError on malformed input. Source without a
    ``Feature:`` yields an empty Document.
    """
    ast = Parser().parse(TokenScanner(text))
    feature = ast.get("feature")
    if not feature:
        return Document(description="")

    scenarios = tuple(
        _scenario_from_ast(child["scenario"]) for child in feature.get("children", []) if child.get("scenario")
    )
    return Document(
        description=(feature.get("description") or "").strip(),
        scenarios=scenarios,
        name=feature.get("name", ""),
    )


def load_feature(path: Path) -> Document:
    return parse_feature(path.read_text(encoding="utf-8"))
