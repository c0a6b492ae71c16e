"""The casing pass.

One left-to-right walk over the words from preprocess.split_words().  Each
word goes to the first handler that claims it; handlers update the
CaseContext and write to its output.  The mode's word hook, if any, gets
the first look at every word.
"""

import re

from guesscase.context import CLOSING_BRACKETS, OPENING_BRACKETS
from guesscase.preprocess import STOP_CHARS
from guesscase.words import (
    SERIES_WORDS,
    STYLED_ABBREVIATIONS,
    is_contraction_suffix,
    is_lowercase_word,
    is_roman_numeral,
    is_uppercase_word,
)

OPENING_QUOTES = frozenset("“„«‹")
CLOSING_QUOTES = frozenset("”»›")
SINGLE_QUOTES = frozenset("'´`‘’")

# Force the next word to start uppercase when followed by a space.
LINE_STOPS = frozenset("?!;:")

_DIGITS = re.compile(r"^[0-9]+$")
_THREE_DIGITS = re.compile(r"^[0-9]{3}$")


def _capitalize(word):
    return word[:1].upper() + word[1:].lower()


def _word_at(words, i):
    return words[i] if 0 <= i < len(words) else None


def _next_word(words, i):
    """Next word after ``i`` that is not a space."""
    for word in words[i + 1:]:
        if word != " ":
            return word
    return None


def _is_letter(word):
    return word is not None and len(word) == 1 and word.isalpha()


def _at_word_start(words, i):
    """True if nothing but a space, bracket or opening quote precedes ``i``."""
    prev = _word_at(words, i - 1)
    return (prev is None or prev == " " or prev in OPENING_BRACKETS
            or prev in OPENING_QUOTES or prev == '"')


def _starts_acronym(words, i):
    # u.s.a. -> a single letter, a period, and another single letter
    return (_is_letter(words[i]) and _word_at(words, i + 1) == "."
            and _is_letter(_word_at(words, i + 2)))


# ── Punctuation ───────────────────────────────────────────────────────

def _do_whitespace(ctx, words, i):
    if words[i] != " ":
        return 0
    ctx.space_next_word = True
    return 1


def _do_double_quote(ctx, words, i):
    word = words[i]
    if word == '"':
        opening = _at_word_start(words, i) and _word_at(words, i + 1) != " "
    elif word in OPENING_QUOTES:
        opening = True
    elif word in CLOSING_QUOTES:
        opening = False
    else:
        return 0
    ctx.append(word)
    if opening:
        ctx.force_caps = True
    return 1


def _do_single_quote(ctx, words, i):
    """Apostrophes and single quotes.

    'Round Midnight  -> opening quote, next word capitalized
    Don't, 80's      -> apostrophe between two words
    Truckin'         -> trailing apostrophe, nothing to do
    """
    if words[i] not in SINGLE_QUOTES:
        return 0
    space_before = _at_word_start(words, i)
    space_after = _word_at(words, i + 1) in (None, " ")
    ctx.append(words[i])
    if space_before and not space_after:
        ctx.force_caps = True
    elif not space_before and not space_after:
        ctx.singlequote = True
    return 1


def _do_opening_bracket(ctx, words, i):
    bracket = words[i]
    if bracket not in OPENING_BRACKETS:
        return 0
    # "Song(Remix)" -> "Song (Remix)"
    last = ctx.last_output()
    if last is not None and (last[-1].isalnum() or last in CLOSING_BRACKETS):
        ctx.space_next_word = True
    ctx.append(bracket)
    ctx.push_bracket(bracket)
    ctx.force_caps = True
    ctx.acronym = False
    return 1


def _do_closing_bracket(ctx, words, i):
    bracket = words[i]
    if bracket not in CLOSING_BRACKETS:
        return 0
    # A stray or mismatched bracket is reported and kept as plain text.
    ctx.pop_bracket(bracket)
    ctx.append(bracket)
    ctx.acronym = False
    ctx.feat = False
    return 1


def _do_comma(ctx, words, i):
    if words[i] != ",":
        return 0
    ctx.append(",")
    return 1


def _do_period(ctx, words, i):
    if words[i] != ".":
        return 0
    ctx.append(".")
    following = _word_at(words, i + 1)
    if ctx.acronym:
        ctx.acronym = _is_letter(following)
        return 1
    ellipsis = _word_at(words, i - 1) == "." or following == "."
    if following == " " and not ellipsis:
        ctx.force_caps = True
    return 1


def _do_line_stop(ctx, words, i):
    if words[i] not in LINE_STOPS:
        return 0
    ctx.append(words[i])
    if _word_at(words, i + 1) in (None, " "):
        ctx.force_caps = True
    return 1


def _do_hyphen(ctx, words, i):
    """Hyphens.

    A spaced hyphen starts a new part of the title.  In title case the
    parts of a hyphenated word are capitalized on their own (Down-N-Dirty).
    """
    if words[i] != "-":
        return 0
    spaced = _word_at(words, i - 1) == " " and _word_at(words, i + 1) == " "
    ctx.append("-")
    if spaced or not ctx.mode.sentence_caps:
        ctx.force_caps = True
    return 1


def _do_slash(ctx, words, i):
    if words[i] != "/":
        return 0
    ctx.append("/")
    if not ctx.mode.sentence_caps:
        ctx.force_caps = True
    return 1


def _do_other_punctuation(ctx, words, i):
    if len(words[i]) != 1 or words[i] not in STOP_CHARS:
        return 0
    ctx.append(words[i])
    return 1


# ── Numbers ───────────────────────────────────────────────────────────

def _do_digits(ctx, words, i):
    """Keep grouped numbers (10,000,000) and decimals together.

    The first grouping separator seen sets number_split_char for the rest
    of the title; the other separator is then read as a decimal point.
    """
    if not _DIGITS.match(words[i]):
        return 0
    number = [words[i]]
    j = i + 1
    # Only a lead group of up to three digits can be followed by more groups.
    ctx.number_split_expect = len(words[i]) <= 3
    while ctx.number_split_expect:
        sep = _word_at(words, j)
        group = _word_at(words, j + 1) or ""
        if sep not in (",", ".") or not _THREE_DIGITS.match(group):
            ctx.number_split_expect = False
        elif ctx.number_split_char not in (None, sep):
            ctx.number_split_expect = False
        else:
            ctx.number_split_char = sep
            number.extend((sep, group))
            j += 2

    if (_word_at(words, j) in (",", ".")
            and words[j] != ctx.number_split_char
            and _DIGITS.match(_word_at(words, j + 1) or "")):
        number.extend(words[j:j + 2])
        j += 2

    ctx.append("".join(number))
    ctx.acronym = False
    ctx.part = ctx.volume = False
    return j - i


# ── Words ─────────────────────────────────────────────────────────────

def _do_abbreviation(ctx, words, i):
    """feat. and vs. stay lowercase unless they open the title."""
    styled = STYLED_ABBREVIATIONS.get(words[i].lower())
    if styled is None:
        return 0
    consumed = 2 if _word_at(words, i + 1) == "." else 1
    if not ctx.has_letters():
        styled = _capitalize(styled)
    ctx.append(styled)
    ctx.force_caps = False
    ctx.singlequote = False
    ctx.feat = styled.lower() == "feat."
    return consumed


def _do_series_word(ctx, words, i):
    """Name Part 2 -> Name, Part 2 (same for Parts and Volume)."""
    lower = words[i].lower()
    if lower not in SERIES_WORDS:
        return 0
    number = _next_word(words, i)
    if number is None or not (_DIGITS.match(number) or is_roman_numeral(number)):
        return 0
    last = ctx.last_output()
    if (last is not None and last[-1].isalnum()
            and not ctx.inside_brackets() and not ctx.feat):
        ctx.append_glued(",")
    ctx.append(case_word(ctx, words, i))
    ctx.force_caps = False
    ctx.singlequote = False
    ctx.part = lower.startswith("part")
    ctx.volume = lower == "volume"
    return 1


def case_word(ctx, words, i):
    """Return words[i] cased according to the context and mode."""
    word = words[i]
    lower = word.lower()
    if (ctx.part or ctx.volume) and is_roman_numeral(word):
        return word.upper()
    if is_uppercase_word(word, ctx.options):
        return word.upper()
    if _is_letter(word) and (ctx.acronym or _starts_acronym(words, i)):
        return word.upper()
    if ctx.force_caps:
        return _capitalize(word)
    if ctx.singlequote and is_contraction_suffix(word):
        return lower
    if ctx.mode.sentence_caps:
        return lower
    if is_lowercase_word(word):
        return lower
    return _capitalize(word)


def _do_word(ctx, words, i):
    word = words[i]
    ctx.append(case_word(ctx, words, i))
    if _is_letter(word) and (ctx.acronym or _starts_acronym(words, i)):
        ctx.acronym = _word_at(words, i + 1) == "."
    else:
        ctx.acronym = False
    if word[:1].isalpha():
        ctx.force_caps = False
    ctx.singlequote = False
    ctx.part = ctx.volume = False
    return 1


_HANDLERS = (
    _do_whitespace,
    _do_double_quote,
    _do_single_quote,
    _do_opening_bracket,
    _do_closing_bracket,
    _do_comma,
    _do_period,
    _do_line_stop,
    _do_hyphen,
    _do_slash,
    _do_other_punctuation,
    _do_digits,
    _do_abbreviation,
    _do_series_word,
    _do_word,
)


def case_words(words, ctx):
    """Run the casing pass over ``words`` and return the joined title.

    Bracket problems are recorded on ``ctx.faults``.
    """
    hook = ctx.mode.word_hook
    i = 0
    while i < len(words):
        consumed = hook(ctx, words, i) if hook is not None else 0
        if not consumed:
            for handler in _HANDLERS:
                consumed = handler(ctx, words, i)
                if consumed:
                    break
        i += consumed
    ctx.check_brackets_closed()
    return ctx.get_output()
