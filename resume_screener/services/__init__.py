# services package
"""Shared helpers (text normalization, logging)."""

from resume_screener.services.normalizer import (
    dedupe_skills,
    extract_first_integer,
    is_skill_present,
    normalize_skill,
    round_half_up,
    tokenize,
)
from resume_screener.services.logging_utils import log_section, make_logger, print_with_prefix

__all__ = [
    "dedupe_skills",
    "extract_first_integer",
    "is_skill_present",
    "normalize_skill",
    "round_half_up",
    "tokenize",
    "log_section",
    "make_logger",
    "print_with_prefix",
]
