"""
Test ScoreCalculator
"""

import pytest
from pydantic import ValidationError

from resume_screener.engine.scoring import ScoreCalculator, candidate_id
from resume_screener.models import ExtractedResume, JobRequirements
from resume_screener.services.normalizer import (
    dedupe_skills,
    extract_first_integer,
    is_skill_present,
    round_half_up,
)

# ═══════════════════════════════════════════════════════════════════════════
# TEST DATA
# ═══════════════════════════════════════════════════════════════════════════

JOB = JobRequirements(
    title="Senior Frontend Engineer",
    description="We need a React developer comfortable with SQL and Python",
    required_skills=["React", "Python", "SQL"],
    min_experience_years=3,
    education="Bachelor degree",
    match_threshold=70,
)

CANDIDATE = ExtractedResume(
    name="Jane Roe",
    email="jane@example.com",
    phone="+1-555-0100",
    skills=["React", "SQL"],
    experience="5 years in software development",
    education="Bachelor of Computer Science",
    file_name="jane_roe.pdf",
)


@pytest.fixture
def calculator():
    return ScoreCalculator()


def test_reference_scenario(calculator):
    match = calculator.score(CANDIDATE, JOB)

    assert set(match.matched_skills) == {"React", "SQL"}
    assert match.missing_skills == ("Python",)
    assert match.skill_score == pytest.approx(40.0)
    assert match.experience_score == pytest.approx(20.0)
    assert match.education_score == pytest.approx(5.0)
    assert 0.0 <= match.keyword_score <= 10.0
    assert 65 <= match.match_score <= 75
    assert isinstance(match.match_score, int)
    assert match.experience_years == 5


def test_contact_fields_copied(calculator):
    match = calculator.score(CANDIDATE, JOB, match_id="candidate-7")

    assert match.id == "candidate-7"
    assert match.name == "Jane Roe"
    assert match.email == "jane@example.com"
    assert match.phone == "+1-555-0100"
    assert match.file_name == "jane_roe.pdf"
    assert match.skills == ("React", "SQL")


def test_failed_extraction_gives_zero(calculator):
    failed = ExtractedResume(file_name="broken.docx", extraction_ok=False)
    match = calculator.score(failed, JOB)

    assert match.match_score == 0
    assert match.matched_skills == ()
    assert set(match.missing_skills) == {"React", "Python", "SQL"}
    assert match.email == ""
    assert match.phone == ""
    assert match.name == "Unknown"
    assert match.file_name == "broken.docx"


def test_missing_resume_gives_zero(calculator):
    match = calculator.score(None, JOB)

    assert match.match_score == 0
    assert len(match.missing_skills) == 3
    assert match.file_name == ""


def test_empty_required_skills_gives_full_skill_component(calculator):
    job = JOB.model_copy(update={"required_skills": []})
    for skills in ([], ["Cobol"], ["React", "Python"]):
        resume = CANDIDATE.model_copy(update={"skills": skills})
        match = calculator.score(resume, job)
        assert match.skill_score == 60.0
        assert match.matched_skills == ()
        assert match.missing_skills == ()


@pytest.mark.parametrize("min_years", [0, -2])
def test_no_experience_requirement_gives_full_component(calculator, min_years):
    job = JOB.model_copy(update={"min_experience_years": min_years})
    for experience in ("", "no numbers here", "1 year"):
        resume = CANDIDATE.model_copy(update={"experience": experience})
        assert calculator.score(resume, job).experience_score == 20.0


def test_experience_is_proportional(calculator):
    resume = CANDIDATE.model_copy(update={"experience": "Worked 1 year, then 10 more"})
    match = calculator.score(resume, JOB)

    assert match.experience_years == 1
    assert match.experience_score == pytest.approx(20.0 / 3)


def test_experience_without_number_is_zero_years(calculator):
    resume = CANDIDATE.model_copy(update={"experience": "several years of work"})
    match = calculator.score(resume, JOB)

    assert match.experience_years == 0
    assert match.experience_score == 0.0


@pytest.mark.parametrize(
    "education, expected",
    [
        ("PhD in Physics", 10.0),
        ("Master of Science", 8.0),
        ("Bachelor of Arts", 5.0),
        ("High school diploma", 3.0),
        ("", 3.0),
        # il livello più alto vince anche se compare dopo
        ("Bachelor and Master degrees", 8.0),
        ("Bachelor, Master, PhD", 10.0),
    ],
)
def test_education_priority(calculator, education, expected):
    resume = CANDIDATE.model_copy(update={"education": education})
    assert calculator.score(resume, JOB).education_score == expected


def test_keyword_containment_counts_duplicates(calculator):
    resume = ExtractedResume(skills=["react"], experience="", education="")
    # "react" due volte, "reactive" contiene "react", "re" è contenuto in "react"
    job = JOB.model_copy(update={"description": "React react reactive re angular"})

    assert calculator.count_keyword_matches(job.description, resume) == 4


def test_keyword_component_saturates(calculator):
    resume = ExtractedResume(skills=["python"], experience="3 years", education="")
    job = JOB.model_copy(update={"description": " ".join(["python"] * 50)})
    match = calculator.score(resume, job)

    assert match.keyword_score == 10.0


def test_keyword_without_candidate_tokens(calculator):
    resume = ExtractedResume(skills=[], experience="", education="")
    assert calculator.count_keyword_matches("anything goes here", resume) == 0


def test_skill_match_is_case_insensitive_and_trimmed(calculator):
    resume = CANDIDATE.model_copy(update={"skills": ["  react ", "sql", "PYTHON"]})
    match = calculator.score(resume, JOB)

    assert match.matched_skills == ("React", "Python", "SQL")
    assert match.missing_skills == ()
    assert match.skill_score == 60.0


def test_perfect_candidate_is_capped_at_100(calculator):
    resume = ExtractedResume(
        name="Max",
        skills=["React", "Python", "SQL"],
        experience="12 years",
        education="PhD",
    )
    job = JOB.model_copy(update={"description": " ".join(["react"] * 30)})
    match = calculator.score(resume, job)

    assert match.match_score == 100


def test_batch_ids_are_deterministic(calculator):
    batch = [CANDIDATE, None, CANDIDATE]
    first = calculator.score_batch(batch, JOB)
    second = calculator.score_batch(batch, JOB)

    assert [m.id for m in first] == ["candidate-1", "candidate-2", "candidate-3"]
    assert first == second
    assert candidate_id(0) == "candidate-1"


def test_batch_tolerates_failed_entries(calculator):
    batch = [None, ExtractedResume(extraction_ok=False), CANDIDATE]
    matches = calculator.score_batch(batch, JOB)

    assert [m.match_score for m in matches[:2]] == [0, 0]
    assert matches[2].match_score > 0


def test_match_is_immutable(calculator):
    match = calculator.score(CANDIDATE, JOB)
    with pytest.raises(Exception):
        match.match_score = 99


def test_skill_partition_invariant(calculator):
    resumes = [
        CANDIDATE,
        CANDIDATE.model_copy(update={"skills": []}),
        CANDIDATE.model_copy(update={"skills": ["python", "Go"]}),
        None,
    ]
    required = {s.lower() for s in JOB.required_skills}
    for match in calculator.score_batch(resumes, JOB):
        matched = {s.lower() for s in match.matched_skills}
        missing = {s.lower() for s in match.missing_skills}
        assert matched | missing == required
        assert not matched & missing
        assert 0 <= match.match_score <= 100


# ═══════════════════════════════════════════════════════════════════════════
# NORMALIZER / JOB MODEL
# ═══════════════════════════════════════════════════════════════════════════

def test_is_skill_present():
    assert is_skill_present(["Python ", "go"], " python")
    assert not is_skill_present(["Python"], "Py")
    assert not is_skill_present([], "Python")
    assert not is_skill_present(["Python"], "   ")


def test_extract_first_integer():
    assert extract_first_integer("5 years in software development") == 5
    assert extract_first_integer("since 2019, 4 years") == 2019
    assert extract_first_integer("") == 0
    assert extract_first_integer("n/a") == 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(66.5) == 67
    assert round_half_up(66.49) == 66
    assert round_half_up(0.0) == 0


def test_dedupe_skills():
    assert dedupe_skills([" React", "react", "SQL", "", "sql ", "Go"]) == ["React", "SQL", "Go"]


def test_job_collapses_duplicate_skills():
    job = JobRequirements(title="Dev", required_skills=["Python", "python", " SQL ", ""])
    assert job.required_skills == ["Python", "SQL"]


def test_job_rejects_non_string_skills():
    with pytest.raises(ValidationError):
        JobRequirements(title="Dev", required_skills=["Python", 3])
    with pytest.raises(ValidationError):
        JobRequirements(title="Dev", required_skills=[None])


def test_job_threshold_is_validated():
    with pytest.raises(Exception):
        JobRequirements(title="Dev", match_threshold=101)
    with pytest.raises(Exception):
        JobRequirements(title="Dev", match_threshold=-1)
