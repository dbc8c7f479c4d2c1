GENERIC_ACKNOWLEDGMENTS: tuple[str, ...] = (
    "Thanks for walking me through that.",
    "I appreciate that context.",
    "That gives me a good sense of your experience.",
    "That is helpful background.",
)

# Checked in order; the first group with a keyword hit wins.
KEYWORD_GROUPS: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    (
        "teamwork",
        ("team", "collaborat", "stakeholder"),
        (
            "It sounds like collaboration and working with others have been important in your work.",
            "It seems like you have had to navigate a lot of teamwork and stakeholder communication.",
        ),
    ),
    (
        "delivery",
        ("deadline", "launch", "ship", "deliverable", "timeline"),
        (
            "It sounds like you have been close to important launches and delivery timelines.",
            "It seems like owning deadlines and outcomes has been a big part of your work.",
        ),
    ),
    (
        "learning",
        ("learn", "learning", "new skill", "picked up"),
        (
            "It sounds like you put real effort into learning and picking up new skills.",
            "It seems like continuous learning has been a theme in your experience.",
        ),
    ),
    (
        "challenge",
        ("conflict", "difficult", "challenge"),
        (
            "It sounds like you have had to work through some challenging situations.",
            "It seems like you have real experience handling difficult situations professionally.",
        ),
    ),
)


def classify_answer(answer: str) -> str | None:
    lower = str(answer or "").strip().lower()
    if not lower:
        return None

    for name, keywords, _ in KEYWORD_GROUPS:
        if any(keyword in lower for keyword in keywords):
            return name
    return None


def build_acknowledgment(answer: str, turn_index: int) -> str:
    """
    One short sentence acknowledging the candidate's last answer.
    turn_index only rotates between phrasings of the same theme.
    """
    group = classify_answer(answer)
    options = next((phrases for name, _, phrases in KEYWORD_GROUPS if name == group), GENERIC_ACKNOWLEDGMENTS)
    return options[turn_index % len(options)]
