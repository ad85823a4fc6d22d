"""
Normalizer
Helper senza stato per confronti case-insensitive tra skill e testo libero.
"""

import math
import re
from typing import Iterable, List

_INTEGER_RE = re.compile(r"\d+")


def normalize_skill(skill: str) -> str:
    return (skill or "").strip().lower()


def is_skill_present(candidate_skills: Iterable[str], skill: str) -> bool:
    """True se `skill` compare tra le skill del candidato (trim + case-insensitive)."""
    target = normalize_skill(skill)
    if not target:
        return False
    return any(normalize_skill(s) == target for s in candidate_skills or [])


def dedupe_skills(skills: Iterable[str]) -> List[str]:
    """Rimuove vuoti e duplicati case-insensitive, mantenendo ordine e prima grafia."""
    seen = set()
    out: List[str] = []
    for raw in skills or []:
        skill = (raw or "").strip()
        key = skill.lower()
        if not skill or key in seen:
            continue
        seen.add(key)
        out.append(skill)
    return out


def extract_first_integer(text: str) -> int:
    # "5 years in software development" -> 5, nessun numero -> 0
    match = _INTEGER_RE.search(text or "")
    return int(match.group(0)) if match else 0


def tokenize(text: str) -> List[str]:
    return (text or "").lower().split()


def round_half_up(value: float) -> int:
    """Arrotonda all'intero più vicino con le metà verso l'alto (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
