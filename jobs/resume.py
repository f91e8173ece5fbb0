import logging
import re
from datetime import date

from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

SKILL_ALIASES = {
    "js": "javascript",
    "javascript": "javascript",
    "node": "nodejs",
    "node.js": "nodejs",
    "reactjs": "react",
    "react.js": "react",
    "py": "python",
    "python": "python",
    "sql": "sql",
    "db": "database",
    "html5": "html",
    "css3": "css",
}

_SKILLS_SECTION = re.compile(
    r'(?:skills|technical skills|proficiencies):?\s*([\s\S]+?)(?=\n\s*\n|\n(?:experience|education|work history)|$)',
    re.IGNORECASE,
)
_EXPERIENCE_SECTION = re.compile(
    r'(?:experience|work experience|employment history):?\s*([\s\S]+?)(?=\n\s*\n|\n(?:education|skills)|$)',
    re.IGNORECASE,
)
_DATE_RANGE = re.compile(r'(\d{4})\s*[-–]\s*(\d{4}|present)', re.IGNORECASE)
_SKILL_SPLIT = re.compile(r'[,;•|\n/]+')


def normalize_skill(skill):
    cleaned = skill.strip().lower()
    return SKILL_ALIASES.get(cleaned, cleaned)


def extract_text(file_obj):
    """
    Lower-cased text of a PDF resume; empty string when it cannot be read.
    """
    try:
        file_obj.seek(0)
        reader = PdfReader(file_obj)
        text = "\n".join(page.extract_text() or "" for page in reader.pages)
    except Exception as exc:  # malformed PDFs fail with arbitrary errors
        logger.warning("Could not read resume text: %s", exc)
        return ""
    return text.lower()


def extract_skills(text):
    match = _SKILLS_SECTION.search(text)
    section = match.group(1) if match else ""
    skills = []
    for token in _SKILL_SPLIT.split(section):
        skill = normalize_skill(token)
        if len(skill) > 2 and not skill.isdigit() and skill not in skills:
            skills.append(skill)
    return skills


def extract_experience(text, today=None):
    """
    Dated lines such as "Backend Engineer 2018 - 2021" as {title, years}.
    """
    current_year = (today or date.today()).year
    match = _EXPERIENCE_SECTION.search(text)
    section = match.group(1) if match else text

    experience = []
    for line in section.splitlines():
        dates = _DATE_RANGE.search(line)
        if not dates:
            continue
        start = int(dates.group(1))
        end = current_year if dates.group(2).lower() == 'present' else int(dates.group(2))
        title = line[:dates.start()].strip(" -–,:|") or "Unknown"
        experience.append({"title": title, "years": max(end - start, 0)})
    return experience


def parse_resume(file_obj):
    text = extract_text(file_obj)
    return {
        "text": text,
        "skills": extract_skills(text),
        "experience": extract_experience(text),
    }
