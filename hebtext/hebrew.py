from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, List

# Nikud and te'amim. Maqaf (U+05BE), paseq (U+05C0), sof pasuq (U+05C3) and
# nun hafukha (U+05C6) are punctuation, not marks.
_HEBREW_MARKS_RE = re.compile(r"[\u0591-\u05BD\u05BF-\u05C2\u05C4\u05C5\u05C7]")
_MAJOR_PUNCT_RE = re.compile(r"[\u05C3\u05C0]")  # sof pasuq, paseq
_HEBREW_LETTER_RE = re.compile(r"[\u05D0-\u05EA]")
_NON_HEBREW_LETTERS_RE = re.compile(r"[^\u05D0-\u05EA]+")
_RTL_RE = re.compile(r"[\u0590-\u05FF\u0600-\u06FF]")

_GEMATRIA: Dict[str, int] = {
    "א": 1, "ב": 2, "ג": 3, "ד": 4, "ה": 5, "ו": 6, "ז": 7, "ח": 8, "ט": 9,
    "י": 10, "כ": 20, "ל": 30, "מ": 40, "נ": 50, "ס": 60, "ע": 70, "פ": 80, "צ": 90,
    "ק": 100, "ר": 200, "ש": 300, "ת": 400,
    # finals keep the value of the base letter
    "ך": 20, "ם": 40, "ן": 50, "ף": 80, "ץ": 90,
}

@dataclass(frozen=True)
class GematriaValue:
    simple: int = 0
    standard: int = 0
    ordinal: int = 0

def is_mark(ch: str) -> bool:
    return _HEBREW_MARKS_RE.match(ch) is not None

def strip_marks(text: str) -> str:
    """Remove vowel points and cantillation, keep everything else."""
    if not text:
        return ""
    return _HEBREW_MARKS_RE.sub("", text)

def letters_only(text: str) -> str:
    if not text:
        return ""
    return _NON_HEBREW_LETTERS_RE.sub("", text)

def compute_gematria(text: str) -> GematriaValue:
    """
    Sum letter values (simple/standard) and letter positions (ordinal).

    Iterates code point by code point: a pointed letter is a base letter
    followed by separate mark code points, which are skipped.
    """
    simple = 0
    standard = 0
    ordinal = 0
    letter_index = 0

    for ch in text or "":
        if is_mark(ch):
            continue
        value = _GEMATRIA.get(ch, 0)
        if value > 0:
            simple += value
            standard += value
            letter_index += 1
            ordinal += letter_index

    return GematriaValue(simple=simple, standard=standard, ordinal=ordinal)

def is_hebrew_word(token: str) -> bool:
    return _HEBREW_LETTER_RE.search(strip_marks(token)) is not None

def extract_unique_words(text: str) -> List[str]:
    """
    Distinct whitespace-delimited tokens that contain a Hebrew letter.

    Sof pasuq and paseq are removed; nikud and te'amim stay in the token.
    Tokens are compared as-is (no Unicode normalization), in order of first
    occurrence.
    """
    if not text:
        return []
    seen: Dict[str, None] = {}
    for chunk in text.split():
        word = _MAJOR_PUNCT_RE.sub("", chunk)
        if word and is_hebrew_word(word):
            seen.setdefault(word, None)
    return list(seen)

def is_rtl(text: str) -> bool:
    return bool(text) and _RTL_RE.search(text) is not None
