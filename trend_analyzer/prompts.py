"""Prompt composition for trend analysis requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .constants import (
    ALL_CATEGORIES,
    BASE_INSTRUCTION,
    CATEGORY_CLAUSE,
    CATEGORY_PUBLICATION_CLAUSE,
    CATEGORY_PUBLICATIONS,
    CLOSING_INSTRUCTION,
    DEFAULT_CATEGORY,
    DEFAULT_LANGUAGE,
    LANGUAGE_CLAUSE,
    LOCATION_CLAUSE,
)


@dataclass(frozen=True)
class FilterSet:
    """User-supplied criteria for one analysis. Empty strings mean unset."""

    country: str = ""
    state: str = ""
    district: str = ""
    city: str = ""
    language: str = DEFAULT_LANGUAGE
    category: str = DEFAULT_CATEGORY

    def location(self) -> str:
        """Most specific place first: city, district, state, country."""
        parts = [self.city, self.district, self.state, self.country]
        return ", ".join(part for part in parts if part)


def compose(filters: FilterSet) -> str:
    """
    Build the analysis prompt for ``filters``.

    Clause order is fixed: base instruction, location, language, category,
    closing instruction. Identical filters always produce identical prompts.
    """
    clauses: List[str] = [BASE_INSTRUCTION]

    location = filters.location()
    if location:
        clauses.append(LOCATION_CLAUSE.format(location=location))

    if filters.language:
        clauses.append(LANGUAGE_CLAUSE.format(language=filters.language))

    category = filters.category
    if category and category != ALL_CATEGORIES:
        publication = CATEGORY_PUBLICATIONS.get(category)
        if publication:
            clauses.append(CATEGORY_PUBLICATION_CLAUSE.format(category=category, publication=publication))
        else:
            clauses.append(CATEGORY_CLAUSE.format(category=category))

    clauses.append(CLOSING_INSTRUCTION)
    return " ".join(clauses)


__all__ = ["FilterSet", "compose"]
