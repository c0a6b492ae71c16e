"""Word classification tables.

All lookups are case-insensitive and the tables never change at runtime.
"""

import re

from guesscase.config import DEFAULT_OPTIONS

# ── Always lowercase ───────────────────────────────────────────────────
# Articles and short prepositions.  "tha" is handled like "the"; da, de, di,
# fe, fi, ina and inna cover common reggae/French/Italian spellings.
LOWERCASE_WORDS = frozenset({
    "a", "an", "and", "as", "at", "but", "by", "da", "de", "di", "fe",
    "fi", "for", "in", "ina", "inna", "n", "nor", "o", "of", "on", "or",
    "tha", "the", "to",
})

# ── Always uppercase ───────────────────────────────────────────────────
# AM/PM and AD are left out on purpose: "I AM", "Let Rip", "AD" all
# produced false positives.
UPPERCASE_WORDS = frozenset({
    "dj", "mc", "tv", "mtv", "ep", "lp", "ymca", "nyc", "ny", "ussr",
    "usa", "r&b", "bbc", "fm", "bc", "ac", "dc", "uk", "bpm", "ok", "nba",
    "rza", "gza", "odb", "dmx", "2xlc",
})

_ROMAN_NUMERAL = re.compile(r"^(?:i|ii|iii|iv|v|vi|vii|viii|ix|x)$", re.IGNORECASE)

# ── Extra title information ────────────────────────────────────────────
# Words that may trail a title as unbracketed extra info:
#   "My Track Extended Dub Remix" -> "My Track (Extended Dub Remix)"
PREP_BRACKET_WORDS = frozenset({
    "a_cappella", "acoustic", "album", "alternate", "bonus", "clean",
    "club", "dance", "demo", "dirty", "disco", "dub", "edit", "extended",
    "instrumental", "karaoke", "live", "megamix", "mix", "original",
    "radio", "re_edit", "remaster", "remastered", "remix", "remixes",
    "reprise", "rework", "short", "single", "take", "version", "vocal",
})

# Single trailing words that are usually part of the title itself
# ("Down-N-Dirty", "Dance, Dance, Dance"), never bracketed
# on their own.
PREP_BRACKET_SINGLE_WORDS = frozenset({
    "acoustic", "album", "alternate", "bonus", "clean", "club", "dance",
    "dirty", "disco", "dub", "extended", "live", "original", "radio",
    "short", "single", "take", "vocal",
})

# Vinyl sizes accepted as part of extra title info when followed by '"'.
VINYL_SIZES = frozenset({"7", "10", "12"})

# ── Contractions ───────────────────────────────────────────────────────
# Suffixes glued behind an apostrophe that stay lowercase:
#   don't, 80's, it'll, we've, 'em, gettin' 'round, c'est, o'clock
CONTRACTION_SUFFIXES = frozenset({
    "all", "cha", "clock", "d", "em", "est", "ll", "m", "n", "re", "round",
    "s", "t", "til", "ve", "way",
})

# ── Abbreviations ──────────────────────────────────────────────────────
# Written lowercase with a trailing period wherever they occur.
STYLED_ABBREVIATIONS = {
    "feat": "feat.",
    "ft": "feat.",
    "vs": "vs.",
}

# Words that introduce a series number: "Name, Part 2", "Name, Volume IV".
SERIES_WORDS = frozenset({"part", "parts", "volume"})


def is_lowercase_word(word):
    return word.lower() in LOWERCASE_WORDS


def is_roman_numeral(word):
    return bool(_ROMAN_NUMERAL.match(word))


def is_uppercase_word(word, options=DEFAULT_OPTIONS):
    """True for known acronyms, and for roman numerals when enabled."""
    if word.lower() in UPPERCASE_WORDS:
        return True
    return bool(options.uppercase_roman_numerals and is_roman_numeral(word))


def is_prep_bracket_word(word):
    return word.lower() in PREP_BRACKET_WORDS


def is_prep_bracket_single_word(word):
    return word.lower() in PREP_BRACKET_SINGLE_WORDS


def is_contraction_suffix(word):
    return word.lower() in CONTRACTION_SUFFIXES
