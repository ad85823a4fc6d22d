import argparse
import csv
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

from resume_screener.engine.export import SKILLS_SEPARATOR
from resume_screener.models import ExtractedResume, JobRequirements
from resume_screener.orchestrator import ScreeningOrchestrator, ScreeningResult

# Colonne accettate per un batch di CV in formato CSV
RESUME_COLUMNS = ["name", "email", "phone", "skills", "experience", "education", "file_name", "extraction_ok"]


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SystemExit(f"Impossibile leggere {path}: {e}")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return True
    return str(value).strip().lower() not in {"false", "0", "no", "failed", "error"}


def _split_skills(value: Any) -> List[str]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return []
    if isinstance(value, list):
        return [str(s).strip() for s in value if s is not None and str(s).strip()]
    return [s.strip() for s in str(value).split(";") if s.strip()]


def _env_threshold() -> Optional[int]:
    raw = (os.getenv("SCREENING_THRESHOLD") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"SCREENING_THRESHOLD non valido: {raw!r} (atteso un intero 0-100)")


def load_job(path: Path, threshold: Optional[int] = None) -> JobRequirements:
    data = _read_json(path)
    if not isinstance(data, dict):
        raise SystemExit(f"{path}: atteso un oggetto JSON con i requisiti del job")
    if threshold is not None:
        data["match_threshold"] = threshold
    try:
        return JobRequirements(**data)
    except ValidationError as e:
        raise SystemExit(f"Job non valido in {path}: {e}")


def load_resumes(path: Path) -> List[Optional[ExtractedResume]]:
    """
    Carica il batch di CV estratti da JSON (lista di oggetti, `null` = estrazione
    fallita) o da CSV (skill separate da ';').
    """
    if path.suffix.lower() == ".csv":
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise SystemExit(f"Impossibile leggere {path}: {e}")
        records: List[Optional[Dict[str, Any]]] = df.reindex(columns=RESUME_COLUMNS, fill_value="").to_dict("records")
    else:
        records = _read_json(path)
        if not isinstance(records, list):
            raise SystemExit(f"{path}: atteso un array JSON di CV")

    resumes: List[Optional[ExtractedResume]] = []
    for record in records:
        if not record or not isinstance(record, dict):
            resumes.append(None)
            continue
        record = dict(record)
        record["skills"] = _split_skills(record.get("skills"))
        record["extraction_ok"] = _parse_bool(record.get("extraction_ok"))
        try:
            resumes.append(ExtractedResume(**{k: v for k, v in record.items() if k in RESUME_COLUMNS}))
        except ValidationError:
            # Record malformato: trattato come estrazione fallita
            resumes.append(ExtractedResume(file_name=str(record.get("file_name") or ""), extraction_ok=False))
    return resumes


def _stats_rows(result: ScreeningResult) -> List[Dict[str, str]]:
    stats: List[Dict[str, str]] = []

    def _add(section: str, metric: str, value: Any) -> None:
        stats.append({"section": section, "metric": metric, "value": str(value)})

    summary = result.summary
    _add("overview", "total_candidates", summary.total_candidates)
    _add("overview", "qualified", summary.qualified_count)
    _add("overview", "rejected", summary.rejected_count)
    _add("overview", "qualification_rate_%", f"{summary.qualification_rate:.1f}")
    _add("overview", "threshold", result.threshold)
    _add("score", "average", summary.average_score)
    _add("score", "top_performers", summary.top_performers)
    for bucket in summary.score_histogram:
        _add("score_distribution", bucket.label, bucket.count)
    for item in summary.top_skills:
        _add("skills", item.skill, f"{item.count} ({item.percentage}%)")
    _add("insight", summary.pool_quality, summary.insight)
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Valuta un batch di CV estratti contro un job, salva il CSV dei "
            "risultati e un CSV di statistiche."
        )
    )
    parser.add_argument("--job", required=True, help="File JSON con i requisiti del job.")
    parser.add_argument("--resumes", required=True, help="File JSON o CSV con i CV estratti.")
    parser.add_argument("--out-dir", default=os.getenv("SCREENING_OUT_DIR", "data/screening"), help="Directory di output.")
    parser.add_argument(
        "--threshold",
        type=int,
        default=_env_threshold(),
        help="Sovrascrive la soglia di qualificazione del job (0-100).",
    )
    parser.add_argument("--top-skills", type=int, default=10, help="Numero di skill nella classifica di frequenza.")
    parser.add_argument("--input-order", action="store_true", help="Esporta nell'ordine di input invece che per score.")
    parser.add_argument("--verbose", action="store_true", help="Abilita log verbose.")

    args = parser.parse_args(argv)

    job_path = Path(args.job).resolve()
    resumes_path = Path(args.resumes).resolve()
    for path in (job_path, resumes_path):
        if not path.exists():
            raise SystemExit(f"File non trovato: {path}")

    out_dir = Path(args.out_dir).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    job = load_job(job_path, threshold=args.threshold)
    resumes = load_resumes(resumes_path)

    orchestrator = ScreeningOrchestrator(top_skills_limit=args.top_skills, verbose=args.verbose)
    result = orchestrator.run(resumes, job)

    out_path = out_dir / result.export_filename
    out_path.write_text(result.to_csv(ranked=not args.input_order) + "\n", encoding="utf-8")

    stats_path = out_dir / f"{out_path.stem}_stats.csv"
    with stats_path.open("w", encoding="utf-8", newline="") as sf:
        w = csv.DictWriter(sf, fieldnames=["section", "metric", "value"])
        w.writeheader()
        w.writerows(_stats_rows(result))

    summary = result.summary
    print("\n" + "=" * 70)
    print(f"  SUMMARY – {job.title or 'Job'}")
    print("=" * 70)
    print(f"  Candidati: {summary.total_candidates} ({summary.qualified_count} qualified, "
          f"{summary.rejected_count} rejected, soglia {result.threshold}%)")
    print(f"  Score medio: {summary.average_score}%  Top performer (>=90%): {summary.top_performers}")
    print(f"  Distribuzione: {', '.join(f'{b.label}={b.count}' for b in summary.score_histogram)}")
    if summary.top_skills:
        top = ", ".join(f"{s.skill} ({s.count})" for s in summary.top_skills[:5])
        print(f"  Skill più frequenti: {top}")
    for match in result.ranking.ranked:
        print(f"  {match.match_score:>3}%  {match.status(result.threshold):<9}  "
              f"{match.name or match.file_name}  [{SKILLS_SEPARATOR.join(match.missing_skills) or '-'}]")
    print(f"  {summary.insight}")
    print(f"  Output CSV: {out_path}")
    print(f"  Stats CSV:  {stats_path}")
    print("=" * 70)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
