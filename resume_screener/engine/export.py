"""
Exporter
Serializza il batch di match in CSV (tutti i campi quotati) e suggerisce il
nome del file da scaricare.
"""

import csv
import io
import re
from typing import Dict, List, Sequence

from resume_screener.models.match_result import CandidateMatch

HEADERS = ["Name", "Email", "Phone", "Match Score", "Status", "Skills", "Experience"]
SKILLS_SEPARATOR = "; "
FILENAME_SUFFIX = "_screening_results"
FILE_EXTENSION = ".csv"
DEFAULT_EXPORT_STEM = "candidates"

_WHITESPACE_RE = re.compile(r"\s+")


def to_rows(matches: Sequence[CandidateMatch], threshold: int) -> List[List[str]]:
    """Righe del CSV (header escluso) nell'ordine corrente del batch."""
    return [
        [
            m.name,
            m.email,
            m.phone,
            f"{m.match_score}%",
            m.status(threshold),
            SKILLS_SEPARATOR.join(m.skills),
            m.experience,
        ]
        for m in matches or []
    ]


def to_csv(matches: Sequence[CandidateMatch], threshold: int) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(HEADERS)
    writer.writerows(to_rows(matches, threshold))
    return buffer.getvalue().rstrip("\n")


def parse_csv(text: str) -> List[Dict[str, str]]:
    """Rilegge un export prodotto da `to_csv` (una dict per riga)."""
    return list(csv.DictReader(io.StringIO(text or "")))


def export_filename(job_title: str) -> str:
    stem = _WHITESPACE_RE.sub("_", (job_title or "").strip())
    return f"{stem or DEFAULT_EXPORT_STEM}{FILENAME_SUFFIX}{FILE_EXTENSION}"
