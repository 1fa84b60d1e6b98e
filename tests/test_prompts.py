"""Tests for prompt composition."""

from __future__ import annotations

from trend_analyzer.constants import (
    BASE_INSTRUCTION,
    CLOSING_INSTRUCTION,
)
from trend_analyzer.prompts import FilterSet, compose


class TestDefaults:

    def test_only_language_and_closing(self) -> None:
        prompt = compose(FilterSet())
        assert prompt == (
            f"{BASE_INSTRUCTION} The language of the trends and story ideas should be english. "
            f"{CLOSING_INSTRUCTION}"
        )

    def test_no_location_or_category_clause(self) -> None:
        prompt = compose(FilterSet(language="english", category="all"))
        assert "location" not in prompt
        assert "category" not in prompt

    def test_empty_language_drops_clause(self) -> None:
        prompt = compose(FilterSet(language=""))
        assert prompt == f"{BASE_INSTRUCTION} {CLOSING_INSTRUCTION}"

    def test_starts_and_ends_with_fixed_instructions(self) -> None:
        prompt = compose(FilterSet(city="Nagpur", category="sports"))
        assert prompt.startswith(BASE_INSTRUCTION)
        assert prompt.endswith(CLOSING_INSTRUCTION)


class TestLocation:

    def test_city_and_state_skip_empty_fields(self) -> None:
        filters = FilterSet(
            city="Pune", state="MH", country="", district="",
            language="marathi", category="entertainment",
        )
        prompt = compose(filters)
        assert "Focus the analysis on the following location: Pune, MH." in prompt
        assert "Lokmat Filmy" in prompt
        assert "should be marathi." in prompt

    def test_order_is_city_district_state_country(self) -> None:
        filters = FilterSet(country="India", state="Maharashtra", district="Haveli", city="Pune")
        assert "location: Pune, Haveli, Maharashtra, India." in compose(filters)

    def test_country_only(self) -> None:
        assert "location: India." in compose(FilterSet(country="India"))


class TestLanguage:

    def test_language_passed_verbatim(self) -> None:
        prompt = compose(FilterSet(language="Klingon (formal)"))
        assert "should be Klingon (formal)." in prompt


class TestCategory:

    def test_crime_names_only_category(self) -> None:
        prompt = compose(FilterSet(category="crime"))
        assert "The analysis should focus on the 'crime' category." in prompt
        assert "publication" not in prompt

    def test_women_oriented_maps_to_sakhi(self) -> None:
        prompt = compose(FilterSet(category="women-oriented"))
        assert (
            "The analysis should focus on the 'women-oriented' category, with story ideas "
            "tailored for a publication like 'Lokmat Sakhi'."
        ) in prompt

    def test_devotional_maps_to_bhakti(self) -> None:
        assert "'Lokmat Bhakti'" in compose(FilterSet(category="devotional"))

    def test_empty_category_adds_nothing(self) -> None:
        assert "category" not in compose(FilterSet(category=""))

    def test_clause_order(self) -> None:
        prompt = compose(FilterSet(city="Pune", language="hindi", category="politics"))
        assert prompt.index("location") < prompt.index("language") < prompt.index("'politics'")


class TestDeterminism:

    def test_identical_filters_identical_prompts(self) -> None:
        filters = FilterSet(city="Mumbai", language="hindi", category="sports")
        assert compose(filters) == compose(filters)
        assert compose(filters) == compose(FilterSet(city="Mumbai", language="hindi", category="sports"))
