from typing import Optional

DEFAULT_ROLE_NAME = "this role"

# ---------- SCRIPTED QUESTION SET ----------

SCRIPTED_QUESTIONS: tuple[str, ...] = (
    "To start us off, can you give me a brief overview of your background and what interests you about {role}{company_suffix}?",
    "Looking back over your recent experience, which role or project has best prepared you for {role}, and why?",
    "Thinking about {role}, what is one accomplishment you are most proud of that you would highlight for this opportunity?",
    "Can you describe a time you had to learn a new skill quickly in order to succeed in your work? What did you do and what was the outcome?",
    "Tell me about a challenging situation with a teammate or stakeholder. How did you handle it and what did you learn?",
    "Imagine you are starting in {role}{company_suffix}. What would you focus on in your first 60 to 90 days?",
)

QUESTION_COUNT = len(SCRIPTED_QUESTIONS)


def role_name(role_title: Optional[str]) -> str:
    return str(role_title or DEFAULT_ROLE_NAME)


def company_suffix(company: Optional[str]) -> str:
    if not company:
        return ""
    return f" at {company}"


def render_question(index: int, role_title: Optional[str] = None, company: Optional[str] = None) -> str:
    if index < 0 or index >= QUESTION_COUNT:
        raise IndexError(f"scripted question index out of range: {index}")

    return SCRIPTED_QUESTIONS[index].format(
        role=role_name(role_title),
        company_suffix=company_suffix(company),
    )
