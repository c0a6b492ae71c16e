"""Per-call state of the casing pass.

A CaseContext is created for one title and thrown away afterwards; nothing
in it is shared between calls.
"""

import logging

from guesscase.config import DEFAULT_OPTIONS
from guesscase.errors import UnbalancedBracketWarning

logger = logging.getLogger(__name__)

BRACKET_PAIRS = {
    "(": ")",
    "[": "]",
    "{": "}",
    "<": ">",
}
OPENING_BRACKETS = frozenset(BRACKET_PAIRS)
CLOSING_BRACKETS = frozenset(BRACKET_PAIRS.values())

# No space is written in front of these, even after whitespace.
_NO_SPACE_BEFORE = frozenset({","}) | CLOSING_BRACKETS


class CaseContext:
    """Flags and output buffer threaded through the casing pass."""

    def __init__(self, mode, options=DEFAULT_OPTIONS):
        self.mode = mode
        self.options = options

        # The first word is always capitalized.
        self.force_caps = True
        self.space_next_word = False
        self.open_brackets = []

        # Inside a dotted acronym such as U.S.A.
        self.acronym = False
        # Previous token was an apostrophe glued between two words.
        self.singlequote = False

        # Number grouping (10,000,000 or 10.000.000).  number_split_char is
        # never cleared: the first separator seen wins for the whole title,
        # on the assumption that people don't mix grammars in one title.
        self.number_split_char = None
        # True while the digits just read may continue with another group.
        self.number_split_expect = False

        # Series number style: "Name, Part 2", "feat." handling.
        self.part = False
        self.volume = False
        self.feat = False

        self.output = []
        self.faults = []

    # ── Brackets ──────────────────────────────────────────────────────

    def inside_brackets(self):
        return len(self.open_brackets) > 0

    def push_bracket(self, bracket):
        if bracket not in OPENING_BRACKETS:
            raise ValueError(f"not an opening bracket: {bracket!r}")
        self.open_brackets.append(bracket)

    def current_close_bracket(self):
        if not self.open_brackets:
            return None
        return BRACKET_PAIRS[self.open_brackets[-1]]

    def pop_bracket(self, bracket):
        """Close the innermost bracket with ``bracket``.

        Returns False (and records a fault) when nothing is open or the
        innermost bracket is of another kind; the stack is left unchanged.
        """
        expected = self.current_close_bracket()
        if expected is None:
            self.report(UnbalancedBracketWarning(
                f"closing {bracket!r} without an opening bracket",
                bracket=bracket, position=len(self.output)))
            return False
        if bracket != expected:
            self.report(UnbalancedBracketWarning(
                f"closing {bracket!r} while {expected!r} was expected",
                bracket=bracket, position=len(self.output)))
            return False
        self.open_brackets.pop()
        return True

    def check_brackets_closed(self):
        if self.open_brackets:
            self.report(UnbalancedBracketWarning(
                "unclosed brackets at end of title: "
                + "".join(self.open_brackets),
                bracket=self.open_brackets[-1], position=len(self.output)))

    # ── Output ────────────────────────────────────────────────────────

    def report(self, fault):
        logger.debug("guess case: %s", fault)
        self.faults.append(fault)

    def last_output(self):
        """Last word written, ignoring spaces."""
        for word in reversed(self.output):
            if word != " ":
                return word
        return None

    def has_letters(self):
        return any(ch.isalpha() for word in self.output for ch in word)

    def append(self, word):
        """Write ``word``, preceded by a space if one is pending."""
        if self.space_next_word and self.output and word not in _NO_SPACE_BEFORE:
            self.output.append(" ")
        self.output.append(word)
        self.space_next_word = False

    def append_glued(self, word):
        """Write ``word`` directly after the previous output.

        A pending space stays pending for the next word.
        """
        self.output.append(word)

    def get_output(self):
        return "".join(self.output)
