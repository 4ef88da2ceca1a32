"""Unit tests for identifier and difficulty inference."""

import pytest_check as check

from lecture_ingest.extractors.metadata import (
    DifficultySignals,
    classify_difficulty,
    collect_signals,
    determine_difficulty,
    extract_course_id,
    extract_lecture_id,
    extract_week_from_title,
    resolve_identifiers,
)
from lecture_ingest.models.schemas import UNKNOWN, Difficulty, RawDocument


class TestCourseId:
    """Tests for course code extraction."""

    def test_joins_separated_code(self) -> None:
        """A space between letters and digits is dropped."""
        check.equal(extract_course_id("CS 101 intro"), "CS101")

    def test_compact_and_suffixed_codes(self) -> None:
        """Compact codes and letter suffixes are kept."""
        check.equal(extract_course_id("Welcome to COMP1234"), "COMP1234")
        check.equal(extract_course_id("MATH-2001B notes"), "MATH2001B")

    def test_no_code(self) -> None:
        """Text without a course code gives Unknown."""
        check.equal(extract_course_id("an introduction to sorting"), UNKNOWN)


class TestLectureId:
    """Tests for lecture identifier extraction."""

    def test_canonical_prefix(self) -> None:
        """The prefix is capitalized."""
        check.equal(extract_lecture_id("this is lecture 5 of the course"), "Lecture 5")

    def test_roman_numerals_kept_as_written(self) -> None:
        """Roman numerals keep their case; only the prefix is canonical."""
        check.equal(extract_lecture_id("week iii overview"), "Week iii")
        check.equal(extract_lecture_id("LECTURE IV"), "Lecture IV")

    def test_no_identifier(self) -> None:
        """Text without an identifier gives Unknown."""
        check.equal(extract_lecture_id("Binary search trees"), UNKNOWN)

    def test_week_from_title(self) -> None:
        """Compact week mentions in titles are found."""
        check.equal(extract_week_from_title("Databases wk3 notes"), "Week 3")
        check.equal(extract_week_from_title("Databases"), UNKNOWN)


class TestResolveIdentifiers:
    """Tests for content-first identifier resolution."""

    def test_content_wins(self) -> None:
        """IDs in the content are used before document hints."""
        document = RawDocument(text="", title="Week 9", subject="MATH2000")

        check.equal(
            resolve_identifiers("COMP1234 lecture 3", document), ("COMP1234", "Lecture 3")
        )

    def test_hints_fill_gaps(self) -> None:
        """Subject and company give the course; the title gives the week."""
        document = RawDocument(text="", title="Graphs wk4", company="INFO 201 Faculty")

        check.equal(resolve_identifiers("plain text", document), ("INFO201", "Week 4"))

    def test_nothing_found(self) -> None:
        """Without any match both IDs are Unknown."""
        check.equal(resolve_identifiers("", RawDocument(text="")), (UNKNOWN, UNKNOWN))


class TestDifficulty:
    """Tests for the difficulty classifier."""

    def test_no_signals_is_medium(self) -> None:
        """No keywords and no math symbols give Medium."""
        check.equal(determine_difficulty("The weather is nice today"), Difficulty.MEDIUM)
        check.equal(determine_difficulty(""), Difficulty.MEDIUM)

    def test_math_saturated_is_hard(self) -> None:
        """More than 50 math symbols give Hard regardless of keywords."""
        text = "variable loop string " * 10 + "a = b + c " * 30

        check.equal(determine_difficulty(text), Difficulty.HARD)

    def test_basic_keywords_are_easy(self) -> None:
        """Only basic keywords and few symbols give Easy."""
        text = "A variable inside a loop, an array and a string."

        check.equal(determine_difficulty(text), Difficulty.EASY)

    def test_advanced_keywords_are_hard(self) -> None:
        """A majority of advanced vocabulary gives Hard."""
        text = "Quantum cryptography meets machine learning."

        check.equal(determine_difficulty(text), Difficulty.HARD)

    def test_equation_numbers_are_hard(self) -> None:
        """Many numbered equations give Hard."""
        check.equal(determine_difficulty("(1) (2) (3) (4) (5) (6)"), Difficulty.HARD)

    def test_mixed_vocabulary_is_medium(self) -> None:
        """Intermediate vocabulary without dominance gives Medium."""
        text = "recursion and a hash table with a graph"

        check.equal(determine_difficulty(text), Difficulty.MEDIUM)


class TestSignals:
    """Tests for signal collection and the decision table."""

    def test_counts_whole_word_keywords(self) -> None:
        """Keywords match whole words only."""
        signals = collect_signals("loop loops looping")

        check.equal(signals.basic, 1)

    def test_symbol_boost_adds_advanced(self) -> None:
        """Symbol-dense text adds to the advanced tally."""
        signals = collect_signals("=" * 31)

        check.equal(signals.symbols, 31)
        check.equal(signals.advanced, 3)

    def test_operators_count_as_symbols(self) -> None:
        """Minus, times and slash operators alone can saturate the count."""
        signals = collect_signals("x - y / z * w " * 20)

        check.equal(signals.symbols, 60)
        check.equal(classify_difficulty(signals), Difficulty.HARD)

    def test_symbol_set(self) -> None:
        """Calculus signs and Greek letters count; other glyphs do not."""
        check.equal(collect_signals("∫ ∂ ∑ √ ≈ ≤ ≥ ± θ α β δ Δ ε ƒ ∏").symbols, 16)
        check.equal(collect_signals("× ÷ ∞ ≠ λ μ σ π").symbols, 0)

    def test_empty_signals_are_medium(self) -> None:
        """No matching rule falls through to Medium."""
        check.equal(classify_difficulty(DifficultySignals()), Difficulty.MEDIUM)

    def test_shares(self) -> None:
        """Shares are relative to all keyword matches."""
        signals = DifficultySignals(basic=1, intermediate=1, advanced=2)

        check.equal(signals.total_keywords, 4)
        check.equal(signals.advanced_share, 0.5)
        check.equal(signals.basic_share, 0.25)
