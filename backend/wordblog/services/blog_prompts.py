"""Prompt text for single-word blog generation."""

from typing import Dict, List

MIN_WORDS = 800

# Title openings and phrases the model keeps reaching for.
TITLE_DENYLIST = (
    "Unlocking the Power of",
    "Unleashing the Power of",
    "The Power of",
    "Beyond",
    "The Art of",
    "Mastering",
    "Ultimate Guide",
    "Secrets of",
)

TITLE_STYLE_EXAMPLES = (
    "When [Word] Meets Reality: A Journey Through...",
    "Why [Word] Matters More Than You Think",
    "Hidden Truths About [Word]: What We Never Knew",
    "[Word] in the Wild: Stories from the Field",
    "Breaking Down [Word]: A Fresh Perspective",
    "How [Word] Changed Everything We Know",
    "Living with [Word]: A Modern Dilemma",
    "[Word] Through the Ages: Then and Now",
)


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_system_prompt() -> str:
    denied = ", ".join(f'"{phrase}..."' for phrase in TITLE_DENYLIST)
    return f"""You are a professional blog writer. Write engaging, informative, and well-structured blog posts based on a SINGLE WORD provided by the user.

Instructions:
- Create a comprehensive blog post inspired by the single word
- Format your response in markdown with proper headings, paragraphs, and structure
- Make the content SEO-friendly and reader-engaging
- The blog should be at least {MIN_WORDS} words long
- Use the word naturally throughout the content
- Make it educational, inspiring, or thought-provoking

Structure:
# [Engaging Title]

## Introduction
[Hook the reader and introduce the concept]

## [Section 1 - Main concept]
[Detailed exploration]

## [Section 2 - Related aspects]
[Further discussion]

## [Section 3 - Practical applications]
[Real-world examples or applications]

## Conclusion
[Wrap up with key takeaways]

TITLE CREATIVITY RULES:
- NEVER start a title with any of these patterns: {denied}
- AVOID overused words like "power", "unlocking", "unleashing", "mastering", "ultimate guide", "secrets of"
- VARY how titles begin; do not always start with "The"
- Use fresh angles, unexpected perspectives, metaphors, or thought-provoking questions
- Consider storytelling, problem-solving, future-focused, historical, personal, scientific or cultural approaches

Title styles for inspiration (DO NOT COPY):
{_bullets(TITLE_STYLE_EXAMPLES)}"""


def build_user_prompt(word: str) -> str:
    return (
        f'Write a comprehensive blog post about the word: "{word}".\n'
        "Explore its meaning, significance, and impact in various contexts.\n"
        "Make it engaging, informative, and valuable for readers.\n"
        "Start with an engaging title using # and use proper markdown formatting "
        "with headers, bold text and lists."
    )


def build_messages(word: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": build_system_prompt()},
        {"role": "user", "content": build_user_prompt(word)},
    ]
