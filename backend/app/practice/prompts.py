from typing import Optional

from app.practice.questions import company_suffix, role_name
from app.schemas import CandidateProfile
from core.config import PROFILE_CONTEXT_CHARS

COMPLETION_TOKEN = "[[INTERVIEW_COMPLETE]]"
FEEDBACK_MARKER = "Feedback summary:"

STATIC_GREETING = (
    "Hi, I am your AI interviewer. When you are ready, click Start interview "
    "and I will begin with the first question."
)

MISSING_PROFILE = "Not available. Start by asking a quick question about their background and goals."

# ----------- Interviewer Prompt -----------

INTERVIEWER_PROMPT = f"""You are a friendly, structured interviewer running a complete mock session for one candidate.

Your job is to guide the candidate through a realistic interview that has a clear beginning, middle, and end.

Follow this structure:
1. Start with a short greeting and one warm up question about their background and interest in the role.
2. Ask 2 or 3 questions about their past experience that relate to the role.
3. Ask 2 or 3 role specific or skills questions.
4. Ask 1 or 2 behavioral or situational questions.
5. Finish with 1 reflection or closing question, then thank them and say the interview is complete.

Rules for each turn:
- Ask exactly one question at a time.
- Keep questions short and clear.
- Briefly acknowledge the candidate's last answer in one or two natural sentences before you ask the next question.
- React naturally to the candidate's tone. If they make a light joke, it is okay to briefly laugh or acknowledge the humor (for example, "Haha, I like that.") before continuing.
- If the candidate does not really answer the question, seems confused, or says they do not know, stay on the same topic: gently rephrase, ask for a concrete example, or narrow the question instead of moving on.
- When the candidate gives a rich answer, pick one specific detail from what they said and ask a short follow up question about that before you move on.
- If the candidate goes off topic, acknowledge what they said briefly, then steer them back to something relevant for the role.
- If the candidate directly asks you for feedback during the interview, give a brief high level comment, then continue the interview.
- Keep each of your responses brief (about 2 to 4 sentences) and avoid bullet lists or headings so it feels like spoken conversation.
- Do not mention that you are an AI language model; act like a human interviewer.
- Keep your overall interview to about 6 to 8 questions unless the candidate clearly wants more.

When you decide the interview is complete, your final reply must have two parts:
1) A short closing in 1 to 2 sentences that feels like a human interviewer thanking them and ending the session.
2) Then a clearly separated written coaching summary using this exact structure:

{FEEDBACK_MARKER}
- 1 sentence that sums up how the candidate came across overall.

Strengths:
- 2 to 4 short bullets that highlight specific strengths, referencing concrete examples they shared and any patterns from their background or resume.

Focus areas:
- 2 to 4 short bullets on where they can improve, phrased constructively and tied to what came up in this practice interview.

Next steps to prepare:
- 3 to 5 concrete actions they can take before a real interview, such as practice prompts, topics to review, or stories to refine.

Use what you know from the candidate profile, their background, and the conversation when you describe strengths, focus areas, and next steps.
Keep the entire feedback block under about 220 words so it can be saved and shown in an "AI tips" card without feeling overwhelming.
In that final reply, explain that you will save these notes so they can review them later from their Roles page in the upcoming interviews list for this role.
At the very end of that final reply, append the exact token {COMPLETION_TOKEN} so the app can detect that the interview has finished. Do not say this token out loud; just include it in the text."""


def build_candidate_profile_block(profile: Optional[CandidateProfile]) -> str:
    if profile is None:
        return MISSING_PROFILE

    lines = [f"Name: {profile.full_name}"]
    if profile.current_role:
        lines.append(f"Current role: {profile.current_role}" + (f" at {profile.company}" if profile.company else ""))
    elif profile.company:
        lines.append(f"Company: {profile.company}")
    if profile.years_experience is not None:
        lines.append(f"Years of experience: {profile.years_experience}")
    if profile.location:
        lines.append(f"Location: {profile.location}")
    if profile.headline:
        lines.append(f"Headline: {profile.headline}")
    if profile.summary:
        lines.append(f"Summary: {profile.summary}")
    if profile.extra_context:
        trimmed = profile.extra_context[:PROFILE_CONTEXT_CHARS]
        lines.append(f"Additional context (from resume or supporting docs): {trimmed}")

    return "\n".join(lines)


def build_system_prompt(role_title: Optional[str], company: Optional[str], profile: Optional[CandidateProfile] = None) -> str:
    return f"""{INTERVIEWER_PROMPT}

Role title: {role_title or "Unknown"}
Company: {company or "Unknown"}

Candidate profile (information you already know before the interview starts):
{build_candidate_profile_block(profile)}"""


def build_kickoff_message(role_title: Optional[str], company: Optional[str]) -> str:
    return (
        "Start a new practice interview now. Greet the candidate briefly and then ask the first question "
        f"in your interview plan. The role is {role_name(role_title)}{company_suffix(company)}. "
        "Do not explain your full plan, just start with the first question."
    )


def split_completion(reply: str) -> tuple[str, bool]:
    text = str(reply or "")
    if COMPLETION_TOKEN not in text:
        return text, False
    return text.replace(COMPLETION_TOKEN, "").rstrip(), True


def extract_feedback_notes(reply: str) -> str:
    text = str(reply or "")
    index = text.find(FEEDBACK_MARKER)
    if index == -1:
        return text.strip()
    return text[index:].strip()
