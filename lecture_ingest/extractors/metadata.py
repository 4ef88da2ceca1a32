"""Metadata inference for lecture content.

Course and lecture identifiers come from regex patterns; difficulty comes
from a keyword and math-symbol frequency heuristic. Keyword rules and
decision thresholds are plain data so the heuristic can be tuned and
tested on its own.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from lecture_ingest.models.schemas import UNKNOWN, Difficulty, RawDocument

COURSE_ID_PATTERNS = [
    re.compile(r"\b([A-Z]{2,4})[-_ ]?(\d{3,4}[A-Z]?)\b"),
    re.compile(r"\b([A-Z]{2})[-_ ]?(\d{3})\b"),
]

LECTURE_ID_PATTERN = re.compile(r"\b(lecture|week|session|unit)\s+(\d+|[IVX]+)\b", re.IGNORECASE)
TITLE_WEEK_PATTERN = re.compile(r"\b(?:week|wk)\s*(\d+)", re.IGNORECASE)


def extract_course_id(text: str) -> str:
    """Extract a course code such as COMP1234 or CS101.

    Returns:
        The code without separator, or "Unknown".
    """
    for pattern in COURSE_ID_PATTERNS:
        match = pattern.search(text)
        if match:
            return f"{match.group(1)}{match.group(2)}"
    return UNKNOWN


def extract_lecture_id(text: str) -> str:
    """Extract a lecture identifier such as "Lecture 5" or "Week iii".

    The prefix is capitalized; the number or numeral is kept as written.

    Returns:
        Canonical "<Prefix> <n>", or "Unknown".
    """
    match = LECTURE_ID_PATTERN.search(text)
    if not match:
        return UNKNOWN
    return f"{match.group(1).capitalize()} {match.group(2)}"


def extract_week_from_title(title: str) -> str:
    """Find a "week 3" / "wk3" mention in a title, as "Week 3"."""
    match = TITLE_WEEK_PATTERN.search(title)
    if not match:
        return UNKNOWN
    return f"Week {match.group(1)}"


def resolve_identifiers(content: str, document: RawDocument) -> tuple[str, str]:
    """Find course and lecture IDs in the content, then in the document hints.

    Title, subject and company are searched for a course code; title and
    subject for a lecture ID, and finally the title for a week mention.

    Returns:
        (course_id, lecture_id), each possibly "Unknown".
    """
    course_id = extract_course_id(content)
    if course_id == UNKNOWN:
        course_id = extract_course_id(f"{document.title} {document.subject} {document.company}")

    lecture_id = extract_lecture_id(content)
    if lecture_id == UNKNOWN:
        lecture_id = extract_lecture_id(f"{document.title} {document.subject}")
    if lecture_id == UNKNOWN:
        lecture_id = extract_week_from_title(document.title)

    return course_id, lecture_id


class Tier(str, Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def _rules(tier: Tier, phrases: str) -> list[tuple[str, Tier]]:
    return [(phrase.strip(), tier) for phrase in phrases.split(",")]


# (phrase, tier) pairs; every whole-word occurrence adds one to the tier
KEYWORD_RULES: list[tuple[str, Tier]] = [
    *_rules(
        Tier.BASIC,
        "variable, function, loop, array, list, string, integer, boolean, if-else, "
        "condition, input, output, print, class, object, method, attribute, property, "
        "parameter, return, python, java, javascript, compiler, interpreter, syntax, "
        "data type, operator, expression, stack, queue, linked list, tree, sorting, searching",
    ),
    *_rules(
        Tier.INTERMEDIATE,
        "algorithm, recursion, data structure, complexity, binary tree, hash table, graph, "
        "dynamic programming, object-oriented, inheritance, polymorphism, encapsulation, "
        "exception, interface, abstract class, database, query, vector, matrix, "
        "linear algebra, probability, statistics, calculus, big o notation, optimization, "
        "concurrent, asynchronous, api, framework",
    ),
    *_rules(
        Tier.ADVANCED,
        "quantum, neural network, machine learning, artificial intelligence, compiler design, "
        "distributed systems, parallel computing, cryptography, formal verification, "
        "lambda calculus, automata theory, turing machine, linear programming, "
        "computational geometry, np-complete, np-hard, approximation algorithm, heuristic, "
        "tensor, differential equation, stochastic process, markov chain, bayesian, "
        "eigenvalue, eigenvector, multivariate statistics, numerical methods, blockchain, "
        "virtual machine",
    ),
]

# Operators and math glyphs counted toward symbol density
MATH_SYMBOLS = "=+-*/^∫∂∑θαβδΔεƒ∏√≈≤≥±"
EQUATION_NUMBER_PATTERN = re.compile(r"\(\d{1,3}\)")

_KEYWORD_PATTERNS = [
    (re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)"), tier) for phrase, tier in KEYWORD_RULES
]


@dataclass(frozen=True)
class DifficultySignals:
    """Counts the difficulty decision is made from."""

    basic: int = 0
    intermediate: int = 0
    advanced: int = 0
    symbols: int = 0
    equation_numbers: int = 0

    @property
    def total_keywords(self) -> int:
        return self.basic + self.intermediate + self.advanced

    @property
    def advanced_share(self) -> float:
        return self.advanced / self.total_keywords if self.total_keywords else 0.0

    @property
    def basic_share(self) -> float:
        return self.basic / self.total_keywords if self.total_keywords else 0.0


@dataclass(frozen=True)
class SymbolBoost:
    """Symbol-dense text adds ``symbols // divisor`` to the advanced tally."""

    min_symbols: int = 30
    min_equation_numbers: int = 3
    divisor: int = 10


SYMBOL_BOOST = SymbolBoost()

# Ordered decision table: the first matching rule wins, otherwise Medium
DECISION_RULES: list[tuple[str, Callable[[DifficultySignals], bool], Difficulty]] = [
    ("math_saturated", lambda s: s.symbols > 50 or s.equation_numbers > 5, Difficulty.HARD),
    (
        "advanced_vocabulary",
        lambda s: s.advanced_share > 0.4 or (s.advanced_share > 0.3 and s.symbols > 20),
        Difficulty.HARD,
    ),
    ("basic_vocabulary", lambda s: s.basic_share > 0.6 and s.symbols < 10, Difficulty.EASY),
]


def collect_signals(text: str, boost: SymbolBoost = SYMBOL_BOOST) -> DifficultySignals:
    """Count keyword tiers, math symbols and equation numbers in text."""
    lower_text = text.lower()
    tallies = {tier: 0 for tier in Tier}
    for pattern, tier in _KEYWORD_PATTERNS:
        tallies[tier] += len(pattern.findall(lower_text))

    symbols = sum(text.count(symbol) for symbol in MATH_SYMBOLS)
    equation_numbers = len(EQUATION_NUMBER_PATTERN.findall(text))

    if symbols > boost.min_symbols or equation_numbers > boost.min_equation_numbers:
        tallies[Tier.ADVANCED] += symbols // boost.divisor

    return DifficultySignals(
        basic=tallies[Tier.BASIC],
        intermediate=tallies[Tier.INTERMEDIATE],
        advanced=tallies[Tier.ADVANCED],
        symbols=symbols,
        equation_numbers=equation_numbers,
    )


def classify_difficulty(signals: DifficultySignals) -> Difficulty:
    """Apply the decision table to collected signals."""
    for _name, predicate, difficulty in DECISION_RULES:
        if predicate(signals):
            return difficulty
    return Difficulty.MEDIUM


def determine_difficulty(text: str) -> Difficulty:
    """Estimate lecture difficulty from vocabulary and math density."""
    return classify_difficulty(collect_signals(text))
