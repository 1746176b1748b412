"""Core constants used across report modules.

This module centralizes shared constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_ROOT = Path(".radar")
DEFAULT_LOAD_WORKERS = 1
SOURCE_FILE_EXTENSION = ".json"
UNCATEGORIZED_CATEGORY = "Uncategorized"
LEADER_KEY_SEPARATOR = "|"
DEFAULT_RANKING_LIMIT = 25
DEFAULT_TOP_CATEGORY_COUNT = 5
DEFAULT_PER_CATEGORY_LIMIT = 5
MIN_FINGERPRINTING_LEVEL = 0
MAX_FINGERPRINTING_LEVEL = 3
TOP_DOMAINS_FILE_NAME = "top_domains.csv"
CATEGORY_COUNTS_FILE_NAME = "category_counts.csv"
TOP_CATEGORIES_FILE_NAME = "top_categories.csv"
CATEGORY_LEADERS_FILE_NAME = "category_leaders.csv"
REPORT_MANIFEST_FILE_NAME = "report_manifest.json"
