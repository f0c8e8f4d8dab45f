"""Topic options offered on the welcome screen."""

TOPIC_OPTIONS: tuple[str, ...] = (
    "Investing",
    "Budgeting",
    "Retirement Planning",
    "Taxes",
    "Bonds",
    "Cryptocurrency",
)


def topic_prompt(topic: str) -> str:
    """Input text pre-filled when a topic button is chosen."""
    return f"Let's discuss {topic}"
