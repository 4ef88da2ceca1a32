"""Prompt contract for the downstream summary and quiz generation services.

The generation services are opaque text-in/text-out collaborators. This
module owns what goes in (prompt text) and how what comes back is read
(summary trimming, quiz JSON parsing), plus the reading-time estimate shown
next to a summary.
"""

import json
import logging
import math
import re

from pydantic import ValidationError

from lecture_ingest.extractors.metadata import determine_difficulty
from lecture_ingest.models.schemas import Difficulty, QuizQuestion

logger = logging.getLogger(__name__)

SUMMARY_MARKER = "# Learning Objectives:"
DEFAULT_SUMMARY_WORDS = 2000
DEFAULT_QUESTION_COUNT = 10

JSON_ARRAY_PATTERN = re.compile(r"\[\s*\{.*\}\s*\]", re.DOTALL)
OPTION_PREFIX_PATTERN = re.compile(r"^[A-Z]\.\s*", re.IGNORECASE)
ANSWER_LETTER_PATTERN = re.compile(r"^[A-D]\.", re.IGNORECASE)

# Reading speed in words per minute
WORDS_PER_MINUTE = {
    Difficulty.EASY: 200,
    Difficulty.MEDIUM: 150,
    Difficulty.HARD: 75,
}
MIN_READING_MINUTES = 5
HARD_EXTRA_TIME = 0.3


class QuizParseError(Exception):
    """Raised when a quiz response contains no usable JSON question list."""

    pass


def build_summary_prompt(content: str, max_words: int = DEFAULT_SUMMARY_WORDS) -> str:
    """Build the educational summary prompt for a lecture.

    Args:
        content: Normalized lecture content.
        max_words: Target summary length.

    Returns:
        Prompt text asking for five markdown sections.
    """
    return f"""As an educational content creator, create a comprehensive lesson summary of the following lecture content.
The summary should:

1. Begin with clear learning objectives
2. Include key concepts and definitions
3. Present the main ideas in a logical, easy-to-follow structure
4. Provide relevant examples where applicable
5. End with key takeaways
6. Be approximately {max_words} words in length
7. Use clear, student-friendly language
8. Include bullet points and numbering for better readability
9. Use markdown formatting for better readability

Here's the lecture content to summarize:

{content}

Please structure your response as follows:

{SUMMARY_MARKER}
[List the main learning objectives.]

# Key Concepts:
[Define and explain important terms and concepts that underpin the learning objectives.]

# Main Content:
[Present the core material in a structured way, covering both foundational knowledge and higher-order thinking skills.]

# Examples & Applications:
[Provide practical examples that illustrate the application, analysis, and synthesis of the material.]

# Key Takeaways:
[Summarize the most important points, emphasizing the learning outcomes.]

Return only the text formatted exactly as specified above. Do not include any additional commentary, concluding summaries, or extraneous text."""


def trim_summary_response(text: str) -> str:
    """Drop any preamble before the learning objectives heading."""
    if text.startswith(SUMMARY_MARKER):
        return text
    index = text.find(SUMMARY_MARKER)
    return text[index:] if index != -1 else text


def question_distribution(question_count: int) -> dict[Difficulty, int]:
    """Split a question count into easy, medium and hard questions.

    At least two easy (30%) and two hard (20%) questions; the rest are medium.
    """
    easy = max(2, int(question_count * 0.3))
    hard = max(2, int(question_count * 0.2))
    return {
        Difficulty.EASY: easy,
        Difficulty.MEDIUM: question_count - easy - hard,
        Difficulty.HARD: hard,
    }


def build_quiz_prompt(content: str, question_count: int = DEFAULT_QUESTION_COUNT) -> str:
    """Build the multiple-choice quiz prompt for a lecture.

    Args:
        content: Lecture content or summary.
        question_count: Number of questions to ask for.

    Returns:
        Prompt text asking for a JSON array of questions.
    """
    split = question_distribution(question_count)
    return f"""As an educational assessment expert, create {question_count} multiple-choice quiz questions based on the following lecture content.

The questions should be distributed as follows:
- {split[Difficulty.EASY]} easy questions (basic understanding)
- {split[Difficulty.MEDIUM]} medium questions (application of concepts)
- {split[Difficulty.HARD]} hard questions (analysis or advanced application)

For each question:
1. Write a clear question.
2. Provide exactly 4 answer choices labeled A, B, C, and D. Each option should start with "A. ", "B. ", "C. ", or "D. " followed by the answer text.
3. Indicate the correct answer as "A. [text]", "B. [text]", etc.
4. Provide a brief explanation of why the answer is correct.
5. Assign a difficulty level (Easy, Medium, Hard).
6. Assign a topic tag that categorizes what concept this question is testing.

Format each question as follows:
{{
"question": "What is...",
"options": ["A. Option 1", "B. Option 2", "C. Option 3", "D. Option 4"],
"answer": "A. Option 1",
"explanation": "This is correct because...",
"difficulty": "Easy|Medium|Hard",
"topicTag": "relevant topic or concept"
}}

Here's the lecture content:

{content}

Return ONLY a valid JSON array of questions without any additional text."""


def _load_json_array(text: str) -> list:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = JSON_ARRAY_PATTERN.search(text)
        if not match:
            raise QuizParseError("No valid JSON found in response") from None
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise QuizParseError(f"Failed to parse JSON question list: {e}") from e

    if not isinstance(data, list):
        raise QuizParseError("Response JSON is not a list of questions")
    return data


def _normalize_difficulty(value: object) -> Difficulty:
    text = str(value or "Medium").strip().capitalize()
    try:
        return Difficulty(text)
    except ValueError:
        return Difficulty.MEDIUM


def normalize_question(raw: dict) -> QuizQuestion:
    """Strip option letters and resolve a lettered answer to its option text."""
    options = [OPTION_PREFIX_PATTERN.sub("", str(option)).strip() for option in raw["options"]]

    answer = str(raw.get("answer") or "")
    if ANSWER_LETTER_PATTERN.match(answer):
        index = "ABCD".index(answer[0].upper())
        if index < len(options):
            answer = options[index]
        else:
            answer = OPTION_PREFIX_PATTERN.sub("", answer).strip()

    return QuizQuestion(
        question=str(raw["question"]),
        options=options,
        answer=answer,
        explanation=str(raw["explanation"]),
        difficulty=_normalize_difficulty(raw.get("difficulty")),
        topic_tag=str(raw.get("topicTag") or "General"),
    )


def parse_quiz_response(text: str) -> list[QuizQuestion]:
    """Parse generated quiz text into validated questions.

    Entries missing a question, an options list, an answer or an
    explanation are skipped.

    Raises:
        QuizParseError: If the response holds no JSON question list.
    """
    questions = []
    for raw in _load_json_array(text):
        if not isinstance(raw, dict):
            continue
        if not (
            raw.get("question")
            and isinstance(raw.get("options"), list)
            and raw.get("answer")
            and raw.get("explanation")
        ):
            continue
        try:
            questions.append(normalize_question(raw))
        except ValidationError as e:
            logger.warning(f"Skipping invalid quiz question: {e}")
    return questions


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def estimate_duration(text: str) -> str:
    """Estimate reading time from word count and content difficulty.

    Returns:
        A duration such as "12 minutes", "1 hour" or "2 hours 5 minutes".
    """
    word_count = len(text.split())
    difficulty = determine_difficulty(text)

    minutes = max(MIN_READING_MINUTES, _round_half_up(word_count / WORDS_PER_MINUTE[difficulty]))
    if difficulty == Difficulty.HARD:
        minutes += _round_half_up(minutes * HARD_EXTRA_TIME)

    if minutes < 60:
        return f"{minutes} minutes"

    hours, remaining = divmod(minutes, 60)
    label = f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{label} {remaining} minutes" if remaining else label
