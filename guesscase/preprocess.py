"""Word splitting, vinyl sizes and extra title information.

These steps run between the pre-process fixlist and the casing pass:

    fix_vinyl_sizes()        "Fine Day (Mike Koglin 12' mix)" -> '... 12" mix)'
    split_words()            'My Track 12" remix' -> ['My', ' ', 'Track', ...]
    prep_extra_title_info()  'My Track Extended Dub Remix'
                                 -> 'My Track (Extended Dub Remix)'
"""

import re

from guesscase.words import (
    VINYL_SIZES,
    is_prep_bracket_single_word,
    is_prep_bracket_word,
)

# Characters that always stand as a token of their own.
STOP_CHARS = "!¿¡\"%&'´`‘’‹›“”„«»()[]{}*+,-./:;<=>?#"

_WORDS = re.compile(
    r"[^%s\s]+|[%s]| " % (re.escape(STOP_CHARS), re.escape(STOP_CHARS))
)

# ── Vinyl sizes ────────────────────────────────────────────────────────
# Only substrings starting with whitespace or '(' are looked at, and a
# trailing "s" stops the match so that "the 12's" stays a plural.
#   "Fine Day (Mike Koglin 12' mix)"               -> ' 12" '
#   'Where Love Lives (Come on In) (12"Classic mix)' -> '(12" Classic'
#   "greatest 80's hits"                           -> unchanged
_VINYL_SIZE = re.compile(r"""(\s+|\()(7|10|12)(?:inch\b|in\b|''|'|")(?=[^s]|$)""",
                         re.IGNORECASE)
_VINYL_SPACE = re.compile(r"""((?:\s+|\()(?:7|10|12)")([^),\s])""")


def fix_vinyl_sizes(text):
    """Rewrite 7in, 10'', 12' ... as 7", 10", 12" followed by a space."""
    text = _VINYL_SIZE.sub('\\1\\2"', text)
    return _VINYL_SPACE.sub("\\1 \\2", text)


def split_words(text):
    """Split a title into words, single punctuation characters and spaces.

    Leading and trailing whitespace is dropped and inner whitespace runs
    collapse to one ' ' token.
    """
    return _WORDS.findall(" ".join(text.split()))


def _is_vinyl_mark(words, i):
    word = words[i]
    if word == '"':
        return i > 0 and words[i - 1] in VINYL_SIZES
    return word in VINYL_SIZES and i + 1 < len(words) and words[i + 1] == '"'


def _strip_spaces(words):
    """Drop trailing spaces in place; True if there were any."""
    stripped = False
    while words and words[-1] == " ":
        words.pop()
        stripped = True
    return stripped


def prep_extra_title_info(words):
    """Put a trailing run of extra title info words into parentheses.

    Scans from the end while words are spaces, vinyl sizes or bracket
    words.  A run that covers the whole title, or that is a single word
    from the single-word list, is left alone.  An opening bracket or hyphen
    right before the run is dropped.  Returns a new list.
    """
    last = len(words) - 1
    wi = last
    found = False
    while wi >= 0 and (words[wi] == " "
                       or _is_vinyl_mark(words, wi)
                       or is_prep_bracket_word(words[wi])):
        found = True
        wi -= 1

    if not found:
        return list(words)

    # wi now points at the word that broke the run; step to the first word
    # of the run itself.
    wi += 1
    while words[wi] == " " and wi < last:
        wi += 1

    # "Down-N-Dirty", "Dance, Dance, Dance": a single trailing word is
    # more likely part of the title than extra info.
    if wi == last and is_prep_bracket_single_word(words[last]):
        return list(words)
    if wi == 0:
        return list(words)

    head = list(words[:wi])
    spaced = _strip_spaces(head)
    if head and head[-1] in ("(", "-"):
        head.pop()
        spaced = _strip_spaces(head)
    # Keep a space only where the title had one ("Song/(Remix)" stays glued).
    if head and spaced:
        head.append(" ")
    return head + ["("] + list(words[wi:]) + [")"]
