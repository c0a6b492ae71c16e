"""Guess case modes.

A mode is plain data: its description, whether it capitalizes like a
sentence, extra rules run before and after the shared fixlists, and an
optional word hook.  The hook is called as ``hook(context, words, index)``
before the default word handling and returns the number of words it
consumed, or 0 to let the engine handle the word.
"""

import re
from dataclasses import dataclass

from guesscase.errors import InvalidModeError
from guesscase.rules import fix


@dataclass(frozen=True)
class Mode:
    id: str
    description: str        # may contain one {url|link text}
    url: str
    sentence_caps: bool
    pre_rules: tuple = ()
    post_rules: tuple = ()
    word_hook: object = None


# ── French spacing ─────────────────────────────────────────────────────
# A space before ; : ! ? (not inside times such as 3:45) and inside
# guillemets.  Already spaced text does not match again.
FRENCH_POSTPROCESS = (
    fix("space before punctuation", r"([^\s!?;:])([!?;:]+)(?!\d)", " ", flags=0, repeat=True),
    fix("space after opening guillemet", r"(«)(\S)", " ", flags=0, repeat=True),
    fix("space before closing guillemet", r"(\S)(»)", " ", flags=0, repeat=True),
)

ENGLISH = Mode(
    id="English",
    description=(
        "This mode capitalises almost all words, with some words (mainly "
        "articles and short prepositions) lowercased. Some words may need "
        "to be manually capitalised to follow the {url|English "
        "capitalisation guidelines}."
    ),
    url="https://musicbrainz.org/doc/Style/Language/English",
    sentence_caps=False,
    pre_rules=(),
    post_rules=(),
    word_hook=None,
)

FRENCH = Mode(
    id="French",
    description=(
        "This mode capitalises titles as sentence mode, but also inserts "
        "spaces before semicolons, colons, exclamation marks and question "
        "marks, and inside guillemets. Some words may need to be manually "
        "capitalised to follow the {url|French capitalisation guidelines}."
    ),
    url="https://musicbrainz.org/doc/Style/Language/French",
    sentence_caps=True,
    pre_rules=(),
    post_rules=FRENCH_POSTPROCESS,
    word_hook=None,
)

SENTENCE = Mode(
    id="Sentence",
    description=(
        "This mode capitalises the first word of a sentence, most other "
        "words are lowercased. Some words, often proper nouns, may need to "
        "be manually fixed according to the {url|relevant language "
        "guidelines}."
    ),
    url="https://musicbrainz.org/doc/Style/Language",
    sentence_caps=True,
    pre_rules=(),
    post_rules=(),
    word_hook=None,
)

MODES = {mode.id: mode for mode in (ENGLISH, FRENCH, SENTENCE)}

_MODES_BY_KEY = {mode_id.lower(): mode for mode_id, mode in MODES.items()}


def get_mode(mode):
    """Resolve a mode id (case-insensitive) or pass a Mode through.

    Raises InvalidModeError for anything else.
    """
    if isinstance(mode, Mode):
        return mode
    if isinstance(mode, str):
        found = _MODES_BY_KEY.get(mode.strip().lower())
        if found is not None:
            return found
    raise InvalidModeError(mode, known=MODES)


_LINK = re.compile(r"\{url\|([^}]*)\}")


def render_description(mode, link_format="{text} ({url})"):
    """Render a mode description, expanding its {url|text} link.

    ``link_format`` receives ``text`` and ``url``; pass
    ``'<a href="{url}" target="_blank">{text}</a>'`` for HTML.
    """
    mode = get_mode(mode)
    return _LINK.sub(
        lambda m: link_format.format(text=m.group(1), url=mode.url),
        mode.description,
    )
