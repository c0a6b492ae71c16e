"""Constants, defaults, and MusicBrainz client settings."""

import os
from dataclasses import dataclass

VERSION = "0.3.0"

# ── Modes ──────────────────────────────────────────────────────────────
DEFAULT_MODE = os.environ.get("GUESSCASE_MODE", "English")

# ── Rule engine ────────────────────────────────────────────────────────
# A repeat rule gets len(text) + RULE_ITERATION_SLACK sweeps before it is
# reported as malformed.  Every sweep of a well-formed rule consumes at
# least one match, so the bound is never reached by a terminating rule.
RULE_ITERATION_SLACK = 8

# ── Word classification ────────────────────────────────────────────────
# Uppercase I, II, ... X unless disabled per call.
UC_ROMAN_NUMERALS = True


@dataclass(frozen=True)
class Options:
    """Per-call options, passed as the ``options`` argument of normalize_title()."""
    uppercase_roman_numerals: bool = UC_ROMAN_NUMERALS


DEFAULT_OPTIONS = Options()

# ── MusicBrainz (release preview) ──────────────────────────────────────
MUSICBRAINZ_APP = "GuessCase"
MUSICBRAINZ_CONTACT = "https://github.com/guesscase/guesscase"
MUSICBRAINZ_RATE_LIMIT = 1.0  # seconds between requests (MB policy)
MUSICBRAINZ_RELEASE_URL = "https://musicbrainz.org/release/{mbid}"
