"""Title normalization entry points.

Pipeline for one title:
1. Collapse whitespace, pre-process fixlist (common fixes, title fixes, mode pre rules)
2. Vinyl sizes (7in, 12'' -> 7", 12")
3. Split into words
4. Bracket trailing extra title info ("... Extended Mix" -> "... (Extended Mix)")
5. Casing pass (mode-dependent)
6. Post-process fixlist (shared fixes, then mode post rules)
"""

import logging
from dataclasses import dataclass

from guesscase.casing import case_words
from guesscase.config import DEFAULT_MODE, DEFAULT_OPTIONS
from guesscase.context import CaseContext
from guesscase.modes import get_mode
from guesscase.preprocess import fix_vinyl_sizes, prep_extra_title_info, split_words
from guesscase.rules import POSTPROCESS_FIXLIST, PREPROCESS_FIXLIST, apply_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessResult:
    title: str
    faults: tuple = ()


def guess_case(raw, mode=DEFAULT_MODE, options=None):
    """Normalize ``raw`` and report what went wrong on the way.

    Returns a GuessResult whose ``faults`` holds MalformedRuleFault and
    UnbalancedBracketWarning instances; the title is produced regardless.
    Raises InvalidModeError for an unknown mode.
    """
    mode = get_mode(mode)
    if options is None:
        options = DEFAULT_OPTIONS
    faults = []

    # Collapse whitespace runs before any rule sees the title.
    s = " ".join((raw or "").split())
    s = apply_rules(s, PREPROCESS_FIXLIST + mode.pre_rules, faults)
    s = fix_vinyl_sizes(s)
    words = prep_extra_title_info(split_words(s))

    ctx = CaseContext(mode, options)
    s = case_words(words, ctx)
    faults.extend(ctx.faults)

    s = apply_rules(s, POSTPROCESS_FIXLIST + mode.post_rules, faults)
    if faults:
        logger.debug("guess case %r -> %r with %d fault(s)", raw, s, len(faults))
    return GuessResult(s, tuple(faults))


def normalize_title(raw, mode=DEFAULT_MODE, options=None):
    """Return the normalized form of a release or track title."""
    return guess_case(raw, mode, options).title
