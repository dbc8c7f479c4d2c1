import re

from app.schemas import ProfileSuggestions
from core.config import RESUME_CONTEXT_CHARS

_CONTACT_RE = re.compile(r"@|https?://", re.IGNORECASE)
_ROLE_AT_COMPANY_RE = re.compile(r"^(.*?)(?: at | @ )(.*)$", re.IGNORECASE)
_EXPERIENCE_HEADING_RE = re.compile(r"experience|work history|employment history", re.IGNORECASE)
_SUMMARY_HEADING_RE = re.compile(r"summary|profile", re.IGNORECASE)

MAX_HEADLINE_CHARS = 160
HEADER_SCAN_LINES = 5
EXPERIENCE_SCAN_LINES = 20


def _is_contact_line(line: str) -> bool:
    return bool(_CONTACT_RE.search(line))


def _split_role_company(line: str) -> tuple[str, str] | None:
    match = _ROLE_AT_COMPANY_RE.match(line)
    if not match:
        return None
    role = match.group(1).strip()
    company = match.group(2).strip()
    if not role or not company:
        return None
    return role, company


def _first_index(lines: list[str], pattern: re.Pattern) -> int:
    for idx, line in enumerate(lines):
        if pattern.search(line):
            return idx
    return -1


def _guess_name(lines: list[str]) -> str:
    for line in lines:
        if _is_contact_line(line):
            continue
        if 2 <= len(line.split()) <= 5:
            return line
    return lines[0]


def extract_profile_from_text(text: str) -> ProfileSuggestions:
    """
    Best-effort profile suggestions from plain resume text.
    Line heuristics only; the candidate reviews every field before saving.
    """
    raw = str(text or "")
    extra_context = raw[:RESUME_CONTEXT_CHARS]
    lines = [line.strip() for line in re.split(r"\r?\n", raw) if line.strip()]
    if not lines:
        return ProfileSuggestions(extra_context=extra_context)

    full_name = _guess_name(lines)
    name_index = lines.index(full_name)

    headline = None
    current_role = None
    company = None

    # Tagline or "Role at Company" just under the name.
    for line in lines[name_index + 1:name_index + 1 + HEADER_SCAN_LINES]:
        if _is_contact_line(line) or len(line) > MAX_HEADLINE_CHARS:
            continue
        if _ROLE_AT_COMPANY_RE.match(line):
            pair = _split_role_company(line)
            if pair:
                current_role, company = pair
                break
            continue
        headline = line
        break

    experience_idx = _first_index(lines, _EXPERIENCE_HEADING_RE)

    if not current_role or not company:
        search_start = experience_idx if experience_idx > -1 else name_index
        for line in lines[search_start:search_start + EXPERIENCE_SCAN_LINES]:
            pair = _split_role_company(line)
            if pair:
                current_role = current_role or pair[0]
                company = company or pair[1]
                break

    summary_idx = _first_index(lines, _SUMMARY_HEADING_RE)
    if summary_idx > -1 and experience_idx > summary_idx:
        summary_lines = lines[summary_idx + 1:experience_idx]
    elif experience_idx > name_index + 1:
        summary_lines = lines[name_index + 1:experience_idx]
    else:
        summary_lines = lines[name_index + 1:name_index + 1 + HEADER_SCAN_LINES]

    return ProfileSuggestions(
        full_name=full_name,
        headline=headline,
        current_role=current_role,
        company=company,
        years_experience=None,
        location=None,
        summary=" ".join(summary_lines) or None,
        extra_context=extra_context,
    )
