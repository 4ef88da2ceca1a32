"""Header and footer detection and cleaning."""

import re
from collections import Counter

from lecture_ingest.postprocessing.common import escape_regexp, is_table_row

MIN_HEADER_LENGTH = 5
REPEAT_THRESHOLD = 3
MAX_HEADER_CANDIDATES = 5

# Lines that repeat legitimately and must survive frequency-based removal
PROTECTED_LINE_PATTERNS = [
    re.compile(r"^(?:Introduction|Conclusion|Summary|Chapter|Section)"),
    re.compile(r"^Slide \d+:"),
    re.compile(r"^\[/?TABLE\]$"),
]

BOILERPLATE_PATTERNS = [
    # University headers
    re.compile(r"\bUNIVERSITY\s+of\s+[A-Z]+\b", re.IGNORECASE),
    # Page indicators
    re.compile(r"\bPage\s+\d+\s+of\s+\d+\b", re.IGNORECASE),
    # Author initials in page corners
    re.compile(r"[A-Z]\.\s+[A-Z]\.\s+[A-Za-z]+\b"),
    # Copyright notices
    re.compile(r"©\s+\d{4}\s+[A-Za-z\s]+\.\s+All\s+rights\s+reserved\.", re.IGNORECASE),
    # Date stamps
    re.compile(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b"),
]


def _is_protected(line: str) -> bool:
    return is_table_row(line) or any(p.match(line) for p in PROTECTED_LINE_PATTERNS)


def find_repeating_lines(content: str, threshold: int = REPEAT_THRESHOLD) -> list[str]:
    """Return the most frequent trimmed lines occurring more than ``threshold`` times.

    Lines of MIN_HEADER_LENGTH characters or fewer are ignored, and at most
    MAX_HEADER_CANDIDATES lines are returned, most frequent first.
    """
    frequency = Counter(
        line.strip() for line in content.split("\n") if len(line.strip()) > MIN_HEADER_LENGTH
    )
    candidates = [line for line, count in frequency.most_common() if count > threshold]
    return candidates[:MAX_HEADER_CANDIDATES]


def remove_repeating_headers(content: str, threshold: int = REPEAT_THRESHOLD) -> str:
    """Remove running headers and footers found by line frequency.

    Every line whose trimmed text equals a repeating candidate is blanked,
    unless the candidate matches a protected pattern.
    """
    candidates = find_repeating_lines(content, threshold)
    removable = {line for line in candidates if not _is_protected(line)}
    if not removable:
        return content

    lines = content.split("\n")
    return "\n".join("" if line.strip() in removable else line for line in lines)


def remove_common_headers_footers(content: str, threshold: int = REPEAT_THRESHOLD) -> str:
    """Remove known academic boilerplate lines when they repeat.

    For each boilerplate pattern matching more than ``threshold`` times, the
    lines consisting solely of the first matched text are removed.
    """
    result = content
    for pattern in BOILERPLATE_PATTERNS:
        matches = pattern.findall(result)
        if len(matches) > threshold:
            first = pattern.search(result).group(0)
            result = re.sub(f"^{escape_regexp(first)}$", "", result, flags=re.MULTILINE)
    return result
