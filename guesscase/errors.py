"""Error and fault types.

Only InvalidModeError is ever raised by the engine.  Faults are recorded on
the result of guess_case() so that a bad rule or an unbalanced title never
blocks the caller.
"""


class GuessCaseError(Exception):
    """Base class for everything the engine reports."""


class InvalidModeError(GuessCaseError, ValueError):
    """An unknown mode id was requested."""

    def __init__(self, mode_id, known=()):
        self.mode_id = mode_id
        self.known = tuple(known)
        msg = f"unknown guess case mode: {mode_id!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


class GuessCaseFault(GuessCaseError):
    """A non-fatal problem met while normalizing a title."""


class MalformedRuleFault(GuessCaseFault):
    """A repeat rule kept matching after its iteration cap."""

    def __init__(self, rule_name, iterations):
        self.rule_name = rule_name
        self.iterations = iterations
        super().__init__(
            f"rule {rule_name!r} still matching after {iterations} iterations"
        )


class UnbalancedBracketWarning(GuessCaseFault):
    """A closing bracket without its opener, or brackets left open."""

    def __init__(self, message, bracket=None, position=None):
        self.bracket = bracket
        self.position = position
        super().__init__(message)
