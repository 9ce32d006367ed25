"""
Dictation cleanup: turn speech-transcribed model numbers into typed form.

    normalize_voice("P thirty two sixty five dash L V E")  -> "P3265-LVE"
    normalize_voice("hikvision dash two CD")               -> "HIKVISION-2 CD"

Only unambiguous words are rewritten; homophones such as "to", "for" and "oh" pass through.
"""

from __future__ import annotations

import re

_UNITS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}
_TEENS = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}
_TENS = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}
_NUMBER_WORDS = {**_UNITS, **_TEENS, **_TENS}

_PUNCTUATION_WORDS = {
    "dash": "-",
    "hyphen": "-",
    "minus": "-",
    "dot": ".",
    "period": ".",
    "point": ".",
    "slash": "/",
}
_PUNCTUATION = frozenset(_PUNCTUATION_WORDS.values())

# could be a digit or an ordinary word; never rewritten
_HOMOPHONES = frozenset({"to", "too", "for", "oh", "won", "ate"})

_HAS_DIGIT = re.compile(r"\d")
_ALNUM = re.compile(r"^[A-Za-z0-9]+$")


def _read_number(words: list[str], i: int) -> tuple[int, int] | None:
    """Read one spoken number starting at words[i]; return (value, words consumed) or None."""
    w = words[i].lower()
    if w not in _NUMBER_WORDS:
        return None
    value = _NUMBER_WORDS[w]
    used = 1
    if w in _TENS and i + 1 < len(words) and words[i + 1].lower() in _UNITS and _UNITS[words[i + 1].lower()] > 0:
        value += _UNITS[words[i + 1].lower()]
        used = 2
    if i + used < len(words) and words[i + used].lower() == "hundred" and 0 < value < 10:
        value *= 100
        used += 1
        rest = _read_number(words, i + used) if i + used < len(words) else None
        if rest is not None and rest[0] < 100:
            value += rest[0]
            used += rest[1]
    return value, used


def _is_fragment(token: str) -> bool:
    """Pieces of a spelled-out model number: digits, single letters, letter+digit mixes."""
    if token.lower() in _HOMOPHONES or not _ALNUM.match(token):
        return False
    return token.isdigit() or len(token) == 1 or bool(_HAS_DIGIT.search(token))


def normalize_voice(raw: str) -> str:
    """Map number and punctuation words to symbols, then glue spelled-out fragments together."""
    words = raw.split()
    if not words:
        return ""

    tokens: list[str] = []
    i = 0
    while i < len(words):
        number = _read_number(words, i)
        if number is not None:
            tokens.append(str(number[0]))
            i += number[1]
            continue
        w = words[i]
        tokens.append(_PUNCTUATION_WORDS.get(w.lower(), w))
        i += 1

    out = tokens[0]
    for prev, tok in zip(tokens, tokens[1:]):
        glue = (
            tok in _PUNCTUATION
            or prev in _PUNCTUATION
            or (_is_fragment(prev) and _is_fragment(tok))
        )
        out += tok if glue else f" {tok}"
    return out.upper()
