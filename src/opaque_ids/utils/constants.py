"""Shared defaults and limits."""
from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_MIN_LENGTH = 0

MIN_ALPHABET_LENGTH = 3
MIN_BLOCKLIST_WORD_LENGTH = 3
SHORT_MATCH_LENGTH = 3
MAX_NUMBER = sys.maxsize

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
SCHEMA_JSON_PATH = DATA_DIR / "schema.json"
BLOCKLIST_PATH = DATA_DIR / "blocklist.txt"
