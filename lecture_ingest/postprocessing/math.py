"""Mathematical notation handling."""

import re

from lecture_ingest.postprocessing.common import FORMULA_DELIMITER, is_table_row

# Subscripts like x_i, superscripts like x^2, and their combinations
MATH_TERM_PATTERNS = [
    re.compile(r"\b[a-zA-Z](?:_[a-zA-Z0-9]+)+\b"),
    re.compile(r"\b[a-zA-Z](?:\^[a-zA-Z0-9]+)+\b"),
    re.compile(r"\b[a-zA-Z](?:_[a-zA-Z0-9]+)(?:\^[a-zA-Z0-9]+)+\b"),
    re.compile(r"\b[a-zA-Z](?:\^[a-zA-Z0-9]+)(?:_[a-zA-Z0-9]+)+\b"),
]

GREEK_MACRO_PATTERN = re.compile(
    r"\\(alpha|beta|gamma|delta|epsilon|zeta|eta|theta|iota|kappa|lambda|mu|nu|xi|pi"
    r"|rho|sigma|tau|upsilon|phi|chi|psi|omega)"
)

FIELD_LABEL_PATTERN = re.compile(r"^[\w\s]+:")
OPERATOR_PATTERN = re.compile(r"[+\-*/^()]")
WRAPPED_TERM_PATTERN = re.compile(r"\$\w+\$")


def fix_math_notation(content: str) -> str:
    """Normalize operator spacing, fractions, and super/subscript artifacts."""
    result = content.replace("$$", "$")
    result = result.replace("≈≈", "≈")
    result = re.sub(r"(\d)\s*([+\-×÷=])\s*(\d)", r"\1 \2 \3", result)
    result = re.sub(r"(\d+)\s*/\s*(\d+)", r"\1/\2", result)
    result = re.sub(r"\^\s*(\d+)", r"^\1", result)
    return re.sub(r"_\s*(\w+)", r"_\1", result)


def clean_repeated_punctuation(content: str) -> str:
    """Collapse repeated punctuation left behind by extraction."""
    result = re.sub(r"([,.;:!?]){2,}", r"\1", content)
    result = re.sub(r'"{2,}', '"', result)
    return re.sub(r"'{2,}", "'", result)


def is_formula_line(line: str) -> bool:
    """True for a line that reads as an equation rather than prose or a label."""
    if "=" not in line or is_table_row(line) or FIELD_LABEL_PATTERN.match(line):
        return False
    return bool(OPERATOR_PATTERN.search(line) or WRAPPED_TERM_PATTERN.search(line))


def wrap_formula_blocks(lines: list[str]) -> list[str]:
    """Group consecutive formula lines into single ``$$ ... $$`` lines."""
    result: list[str] = []
    buffer: list[str] = []

    for line in lines:
        if is_formula_line(line):
            buffer.append(line)
            continue
        if buffer:
            result.append(f"{FORMULA_DELIMITER} {' '.join(buffer)} {FORMULA_DELIMITER}")
            buffer = []
        result.append(line)

    if buffer:
        result.append(f"{FORMULA_DELIMITER} {' '.join(buffer)} {FORMULA_DELIMITER}")
    return result


def enhance_mathematical_content(content: str) -> str:
    """Mark up inline math terms, Greek macros and equation blocks.

    Inline terms become ``$x_i$``, ``\\alpha`` becomes ``[alpha]``, and runs
    of formula lines are wrapped in ``$$`` blocks. Lines are trimmed.
    """
    result = content
    for pattern in MATH_TERM_PATTERNS:
        result = pattern.sub(lambda m: f"${m.group(0)}$", result)

    result = GREEK_MACRO_PATTERN.sub(r"[\1]", result)

    lines = [line.strip() for line in result.split("\n")]
    return "\n".join(wrap_formula_blocks(lines))
