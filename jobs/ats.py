"""
Applicant tracking score: a 0-100 estimate of how well an application's
resume and the seeker's profile fit a job.
"""
import logging
import math
import re
from datetime import date, datetime

from .resume import normalize_skill, parse_resume

logger = logging.getLogger(__name__)

MIN_SHORTLIST_SCORE = 20

_CONTEXT_WORDS = re.compile(r'(software|marketing|finance|engineering)')


def fuzzy_match(pattern, text):
    """
    True when every character of `pattern` appears in `text` in order.
    """
    remaining = iter(text.lower())
    return all(char in remaining for char in pattern.lower())


def _parse_date(value):
    if not value:
        return None
    for fmt, length in (('%Y-%m-%d', 10), ('%Y-%m', 7), ('%Y', 4)):
        try:
            return datetime.strptime(str(value)[:length], fmt).date()
        except ValueError:
            continue
    return None


def profile_experience_years(experience, today=None):
    today = today or date.today()
    total = 0.0
    for entry in experience or []:
        start = _parse_date(entry.get('start_date'))
        if start is None:
            continue
        end = _parse_date(entry.get('end_date')) or today
        total += max((end - start).days, 0) / 365
    return total


def weights_for(job):
    experience_level = (job.experience_level or '').lower()
    is_technical = 'engineer' in job.title.lower() or len(job.skills or []) > 5
    if is_technical:
        return {'skills': 60, 'experience': 20, 'requirements': 20}
    if experience_level == 'senior':
        return {'skills': 40, 'experience': 40, 'requirements': 20}
    return {'skills': 50, 'experience': 30, 'requirements': 20}


def target_years(job):
    return {'senior': 5, 'mid': 2}.get((job.experience_level or '').lower(), 0)


def score_candidate(job, resume_data, seeker, today=None):
    """
    Pure scoring over already-parsed resume data and the seeker profile.
    """
    weights = weights_for(job)
    job_skills = [normalize_skill(skill) for skill in job.skills or []]
    job_requirements = [req.lower() for req in job.requirements or []]
    context_match = _CONTEXT_WORDS.search(job.description.lower())
    job_context = context_match.group(0) if context_match else ''
    job_title = job.title.lower()

    seeker_skills = [normalize_skill(skill) for skill in (seeker.skills or [])]
    all_skills = list(dict.fromkeys(resume_data['skills'] + seeker_skills))
    resume_experience = resume_data['experience']
    seeker_experience = seeker.experience or []

    score = 0.0

    skill_matches = sum(
        1 for job_skill in job_skills
        if any(fuzzy_match(job_skill, skill) for skill in all_skills)
    )
    skill_score = (skill_matches / len(job_skills)) * 50 if job_skills else 0
    score += skill_score * (weights['skills'] / 50)

    total_years = (
        sum(entry['years'] for entry in resume_experience)
        + profile_experience_years(seeker_experience, today)
    )
    experience_match = max(30 - abs(total_years - target_years(job)) * 5, 10)
    score += experience_match * (weights['experience'] / 30)

    titles = [entry['title'].lower() for entry in resume_experience]
    titles += [(entry.get('title') or '').lower() for entry in seeker_experience]
    requirement_matches = sum(
        1 for req in job_requirements if any(req in title for title in titles)
    )
    requirement_score = (requirement_matches / len(job_requirements)) * 20 if job_requirements else 0
    score += requirement_score * (weights['requirements'] / 20)

    irrelevant = any(
        not any(req in entry['title'].lower() for req in job_requirements)
        and job_context not in entry['title'].lower()
        and entry['title'].lower() not in job_title
        for entry in resume_experience
    )
    if irrelevant:
        score -= 10

    return max(0, min(math.floor(score + 0.5), 100))


def score_resume(job, resume_file, seeker):
    """
    Parse and score an uploaded resume; any failure scores 0.
    """
    try:
        return score_candidate(job, parse_resume(resume_file), seeker)
    except Exception:
        logger.exception("ATS scoring failed for job %s, seeker %s", job.pk, seeker.pk)
        return 0


def calculate_ats_score(application):
    """
    Score an application, reusing the stored score when present.
    """
    if application.ats_score is not None:
        return application.ats_score

    try:
        resume_file = application.resume.open('rb')
    except (OSError, ValueError) as exc:
        logger.error("Resume missing for application %s: %s", application.pk, exc)
        return 0
    with resume_file:
        return score_resume(application.job, resume_file, application.seeker)
