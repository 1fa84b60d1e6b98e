"""Fixed vocabularies, prompt fragments and user-facing messages."""

from __future__ import annotations

from typing import Dict, List

DEFAULT_MODEL = "gemini-2.5-flash"

DEFAULT_LANGUAGE = "english"
DEFAULT_CATEGORY = "all"

# Sentinel category that adds no category clause to the prompt
ALL_CATEGORIES = "all"

# Options offered by the UI; the composer itself accepts any language string
LANGUAGE_OPTIONS: Dict[str, str] = {
    "english": "English",
    "hindi": "Hindi",
    "marathi": "Marathi",
}

CATEGORY_OPTIONS: Dict[str, str] = {
    "all": "All Categories",
    "crime": "Crime",
    "sports": "Sports",
    "politics": "Politics",
    "social": "Social",
    "entertainment": "Entertainment",
    "women-oriented": "Women Oriented",
    "devotional": "Devotional",
}

CATEGORIES: List[str] = list(CATEGORY_OPTIONS)

# Categories with a dedicated sister publication
CATEGORY_PUBLICATIONS: Dict[str, str] = {
    "entertainment": "Lokmat Filmy",
    "women-oriented": "Lokmat Sakhi",
    "devotional": "Lokmat Bhakti",
}

BASE_INSTRUCTION = (
    "Analyze the absolute latest, real-time trending topics from Google, YouTube, "
    "and social media. Predict potential viral news and suggest compelling, "
    "ready-to-publish story ideas for news editors."
)
LOCATION_CLAUSE = "Focus the analysis on the following location: {location}."
LANGUAGE_CLAUSE = "The language of the trends and story ideas should be {language}."
CATEGORY_PUBLICATION_CLAUSE = (
    "The analysis should focus on the '{category}' category, with story ideas "
    "tailored for a publication like '{publication}'."
)
CATEGORY_CLAUSE = "The analysis should focus on the '{category}' category."
CLOSING_INSTRUCTION = "Provide a concise, insightful analysis."

# Seconds a password-change confirmation stays visible
NOTICE_TTL_SECONDS = 3.0

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."
EMPTY_ACCOUNT_FIELDS_MESSAGE = "Username and password cannot be empty."
EMPTY_PASSWORD_CHANGE_MESSAGE = "Please select a user and enter a new password."
ACCOUNT_EXISTS_MESSAGE = "Username already exists."
ANALYSIS_FAILED_MESSAGE = "Failed to analyze trends. Please check the console for more details."
PASSWORD_UPDATED_MESSAGE = "Password for {username} has been updated."
ACCESS_DENIED_MESSAGE = "Your role does not allow this action."

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_LANGUAGE",
    "DEFAULT_CATEGORY",
    "ALL_CATEGORIES",
    "LANGUAGE_OPTIONS",
    "CATEGORY_OPTIONS",
    "CATEGORIES",
    "CATEGORY_PUBLICATIONS",
    "NOTICE_TTL_SECONDS",
]
