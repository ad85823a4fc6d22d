"""
Score Calculator
Calcola lo score di match tra un CV estratto e i requisiti di una posizione.

Responsabilità:
- Confronta le skill richieste con quelle del candidato (case-insensitive)
- Valuta esperienza, titolo di studio e sovrapposizione di keyword
- Limita ogni componente al suo massimo e lo score finale a [0, 100]
- Degrada a score 0 quando l'estrazione del CV è fallita
"""

from typing import List, Optional, Sequence, Tuple

from resume_screener.models.job import JobRequirements
from resume_screener.models.resume import ExtractedResume
from resume_screener.models.match_result import CandidateMatch
from resume_screener.services.logging_utils import log_section, make_logger
from resume_screener.services.normalizer import (
    extract_first_integer,
    is_skill_present,
    round_half_up,
    tokenize,
)

# Priorità: il primo livello trovato nel testo vince
EDUCATION_LEVELS: Tuple[Tuple[str, float], ...] = (
    ("phd", 10.0),
    ("master", 8.0),
    ("bachelor", 5.0),
)
DEFAULT_EDUCATION_POINTS = 3.0

UNKNOWN_CANDIDATE = "Unknown"


def candidate_id(index: int) -> str:
    """Identità deterministica basata sulla posizione nel batch (0-based)."""
    return f"candidate-{index + 1}"


class ScoreCalculator:
    """
    Calcola un CandidateMatch per ogni coppia (CV, job).

    LOGICA DI SCORING (pesi di default, somma 100):
    1. Skill richieste presenti        -> max 60
    2. Anni di esperienza              -> max 20
    3. Titolo di studio                -> max 10
    4. Keyword della descrizione       -> max 10
    """

    def __init__(
        self,
        skill_weight: float = 60.0,
        experience_weight: float = 20.0,
        education_weight: float = 10.0,
        keyword_weight: float = 10.0,
        keyword_saturation: int = 20,
        verbose: bool = False
    ):
        self.skill_weight = skill_weight
        self.experience_weight = experience_weight
        self.education_weight = education_weight
        self.keyword_weight = keyword_weight
        self.keyword_saturation = keyword_saturation
        self.verbose = verbose
        self._log = make_logger("ScoreCalculator", enabled=verbose)

    def score(
        self,
        resume: Optional[ExtractedResume],
        job: JobRequirements,
        match_id: str = "candidate-1",
    ) -> CandidateMatch:
        """Calcola il match di un singolo candidato. Non solleva mai per dati del CV."""
        if resume is None or not resume.extraction_ok:
            return self._failed_match(resume, job, match_id)

        self._log(f"Scoring: {resume.name or resume.file_name or match_id} vs {job.title or 'Job'}")

        log_section(self._log, "Step 1: Skill richieste")
        matched, missing = self.match_skills(resume.skills, job.required_skills)
        skill_score = self._skill_score(len(matched), len(job.required_skills))
        self._log(f"   -> Matched: {len(matched)}/{len(job.required_skills)} ({skill_score:.1f})")

        log_section(self._log, "Step 2: Esperienza")
        years = extract_first_integer(resume.experience)
        experience_score = self._experience_score(years, job.min_experience_years)
        self._log(f"   -> {years}/{job.min_experience_years} anni ({experience_score:.1f})")

        log_section(self._log, "Step 3: Istruzione")
        education_score = self._education_score(resume.education)
        self._log(f"   -> {education_score:.1f}")

        log_section(self._log, "Step 4: Keyword")
        keyword_hits = self.count_keyword_matches(job.description, resume)
        keyword_score = self._keyword_score(keyword_hits)
        self._log(f"   -> {keyword_hits} keyword ({keyword_score:.1f})")

        total = skill_score + experience_score + education_score + keyword_score
        final_score = round_half_up(min(max(total, 0.0), 100.0))
        self._log(f"SCORE FINALE: {final_score}/100")

        return CandidateMatch(
            id=match_id,
            name=resume.name,
            email=resume.email,
            phone=resume.phone,
            skills=tuple(resume.skills),
            experience=resume.experience,
            education=resume.education,
            file_name=resume.file_name,
            match_score=final_score,
            matched_skills=tuple(matched),
            missing_skills=tuple(missing),
            skill_score=skill_score,
            experience_score=experience_score,
            education_score=education_score,
            keyword_score=keyword_score,
            experience_years=years,
        )

    def score_batch(
        self,
        resumes: Sequence[Optional[ExtractedResume]],
        job: JobRequirements,
    ) -> List[CandidateMatch]:
        """Un CandidateMatch per CV, nello stesso ordine del batch."""
        return [
            self.score(resume, job, match_id=candidate_id(index))
            for index, resume in enumerate(resumes or [])
        ]

    @staticmethod
    def match_skills(
        candidate_skills: Sequence[str],
        required_skills: Sequence[str],
    ) -> Tuple[List[str], List[str]]:
        """Divide le skill richieste in (presenti, mancanti), grafia del job."""
        matched = []
        missing = []
        for skill in required_skills:
            if is_skill_present(candidate_skills, skill):
                matched.append(skill)
            else:
                missing.append(skill)
        return matched, missing

    def count_keyword_matches(self, description: str, resume: ExtractedResume) -> int:
        """
        Conta le parole della descrizione che contengono, o sono contenute in,
        almeno un token del candidato. Le parole ripetute contano ogni volta.
        """
        composite = " ".join(list(resume.skills) + [resume.experience, resume.education])
        candidate_tokens = set(tokenize(composite))
        if not candidate_tokens:
            return 0
        return sum(
            1
            for word in tokenize(description)
            if any(token in word or word in token for token in candidate_tokens)
        )

    def _skill_score(self, n_matched: int, n_required: int) -> float:
        if n_required == 0:
            return self.skill_weight
        return min(self.skill_weight * n_matched / n_required, self.skill_weight)

    def _experience_score(self, candidate_years: int, required_years: int) -> float:
        if required_years <= 0:
            return self.experience_weight
        return self.experience_weight * min(candidate_years / required_years, 1.0)

    def _education_score(self, education: str) -> float:
        text = (education or "").lower()
        for keyword, points in EDUCATION_LEVELS:
            if keyword in text:
                return min(points, self.education_weight)
        return min(DEFAULT_EDUCATION_POINTS, self.education_weight)

    def _keyword_score(self, hits: int) -> float:
        if self.keyword_saturation <= 0:
            return self.keyword_weight
        return self.keyword_weight * min(hits / self.keyword_saturation, 1.0)

    def _failed_match(
        self,
        resume: Optional[ExtractedResume],
        job: JobRequirements,
        match_id: str,
    ) -> CandidateMatch:
        self._log(f"Estrazione fallita per {match_id}: score 0")
        return CandidateMatch(
            id=match_id,
            name=UNKNOWN_CANDIDATE,
            file_name=resume.file_name if resume is not None else "",
            match_score=0,
            matched_skills=(),
            missing_skills=tuple(job.required_skills),
        )
