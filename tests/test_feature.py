"""Reading feature source into the scenario document."""

from __future__ import annotations

import textwrap
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest
from gherkin.errors import ParserError

from scaffold_feature import Document, Scenario, Step, load_feature, parse_feature

LOGIN_FEATURE = textwrap.dedent(
    """\
    Feature: User login
      Everything about signing in.

      Background:
        Given the site is up

      Scenario: Successful login
        Only with a verified account.

        Given a registered user
        And a valid password
        When the user logs in
        Then access is granted

      Scenario: Nothing yet
    """
)


class TestParseFeature_1:
    def test_1_feature_name_and_description(self) -> None:
        document = parse_feature(LOGIN_FEATURE)
        assert document.name == "User login"
        assert document.description == "Everything about signing in."

    def test_2_scenarios_in_order_without_background(self) -> None:
        document = parse_feature(LOGIN_FEATURE)
        assert [s.name for s in document.scenarios] == ["Successful login", "Nothing yet"]

    def test_3_steps_keep_their_keywords(self) -> None:
        scenario = parse_feature(LOGIN_FEATURE).scenarios[0]
        assert [step.keyword.strip() for step in scenario.steps] == ["Given", "And", "When", "Then"]
        assert scenario.steps[0].text == "a registered user"

    def test_4_scenario_description(self) -> None:
        scenarios = parse_feature(LOGIN_FEATURE).scenarios
        assert scenarios[0].description == "Only with a verified account."
        assert scenarios[1].description is None

    def test_5_scenario_without_steps(self) -> None:
        assert parse_feature(LOGIN_FEATURE).scenarios[1].steps == ()

    def test_6_source_without_feature_is_empty(self) -> None:
        assert parse_feature("# just a comment\n") == Document(description="")

    def test_7_malformed_source_raises(self) -> None:
        with pytest.raises(ParserError):
            parse_feature("this is not gherkin\n")

    def test_8_multi_line_description_is_folded(self) -> None:
        document = parse_feature(
            textwrap.dedent(
                """\
                Feature: Reports

                  Scenario: Yearly report
                    Runs on the first day
                    of the new year.

                    Given a year
                """
            )
        )
        assert document.scenarios[0].description == "Runs on the first day of the new year."


class TestDocument_2:
    def test_1_title_prefers_description(self) -> None:
        assert Document(description="card payments", name="Payments").title == "card payments"

    def test_2_title_falls_back_to_name(self) -> None:
        assert Document(description="  ", name="Payments").title == "Payments"

    def test_3_documents_are_immutable(self) -> None:
        scenario = Scenario(name="s", steps=(Step("Given ", "x"),))
        with pytest.raises(FrozenInstanceError):
            scenario.name = "t"


def test_load_feature_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "menu.feature"
    path.write_text("Feature: Menü\n\n  Scenario: Crème brûlée\n    Given a torch\n", encoding="utf-8")
    document = load_feature(path)
    assert document.name == "Menü"
    assert document.scenarios[0].name == "Crème brûlée"
