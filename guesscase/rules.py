"""Named text-rewrite rules and the engine that applies them.

A rule list is an ordered tuple; earlier rules may produce text that later
rules expect (e.g. "re-mix" becomes "remix" before anything looks for
"remix").  The lists below are built once at import time and never mutated.

Replacement semantics: the first and the last capture group of a match are
spliced back around the expanded replacement, so a pattern can capture its
surrounding whitespace or punctuation without destroying it:

    fix("re-mix -> remix", r"(\\b|^)re-mix(\\b)", "remix")
"""

import logging
import re
from dataclasses import dataclass

from guesscase.config import RULE_ITERATION_SLACK
from guesscase.errors import MalformedRuleFault

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: object         # compiled re.Pattern
    replacement: str
    repeat: bool = False


def fix(name, pattern, replacement, flags=re.IGNORECASE, repeat=False):
    """Build a Rule.

    ``repeat`` rules are applied until their pattern no longer matches;
    other rules replace the first match only.
    """
    if not name:
        raise ValueError("rule name must not be empty")
    return Rule(name, re.compile(pattern, flags), replacement, repeat)


def _splicer(rule):
    groups = rule.pattern.groups

    def replace(m):
        head = (m.group(1) or "") if groups >= 1 else ""
        tail = (m.group(groups) or "") if groups >= 2 else ""
        return head + m.expand(rule.replacement) + tail

    return replace


def apply_rule(text, rule, faults=None):
    replace = _splicer(rule)
    if not rule.repeat:
        return rule.pattern.sub(replace, text, count=1)

    limit = len(text) + RULE_ITERATION_SLACK
    sweeps = 0
    while rule.pattern.search(text):
        if sweeps >= limit:
            fault = MalformedRuleFault(rule.name, sweeps)
            logger.warning("%s; keeping %r", fault, text)
            if faults is not None:
                faults.append(fault)
            break
        text = rule.pattern.sub(replace, text)
        sweeps += 1
    return text


def apply_rules(text, rules, faults=None):
    """Apply ``rules`` in order and return the rewritten text.

    Malformed repeat rules are cut off and appended to ``faults`` (when
    given); the text built so far is kept.
    """
    for rule in rules:
        text = apply_rule(text, rule, faults)
    return text


# ── Common pre-processing ──────────────────────────────────────────────

PREPROCESS_COMMONS = (
    fix("D.J. -> DJ", r"(\b|^)(?:D\.J\.?|DJ\.)(\s|\)|$)", "DJ", repeat=True),
    fix("M.C. -> MC", r"(\b|^)(?:M\.C\.?|MC\.)(\s|\)|$)", "MC", repeat=True),
)

# ── Title pre-processing ───────────────────────────────────────────────
# Misspellings and abbreviations fixed before the title is split into words.

PREPROCESS_TITLES = (
    # trim spaces inside brackets
    fix("spaces after opening brackets", r"([(\[{])\s+(\S)", "", repeat=True),
    fix("spaces before closing brackets", r"(\S)\s+([)\]}])", "", repeat=True),

    # remix variants
    fix("re-mix -> remix", r"(\b|^)re-mix(\b)", "remix", repeat=True),
    fix("remx -> remix", r"(\b|^)remx(\b)", "remix", repeat=True),
    fix("re-mixes -> remixes", r"(\b|^)re-mixes(\b)", "remixes", repeat=True),
    fix("re-make -> remake", r"(\b|^)re-make(\b)", "remake", repeat=True),
    fix("re-makes -> remakes", r"(\b|^)re-makes(\b)", "remakes", repeat=True),
    fix("re-edit variants", r"(\b|^)re-?edit(\b)", "re_edit", repeat=True),
    fix("RMX -> remix", r"(\b|^)RMX(\b)", "remix", repeat=True),

    # extra title information
    fix("alt.take -> alternate take", r"(\b|^)alt\.? take(\b)", "alternate take", repeat=True),
    fix("instr. -> instrumental", r"(\b|^)instr\.?(\s|\)|$)", "instrumental", repeat=True),
    fix("altern. -> alternate", r"(\b|^)altern\.?(\s|\)|$)", "alternate", repeat=True),
    fix("orig. -> original", r"(\b|^)orig\.?(\s|\)|$)", "original", repeat=True),
    fix("ver(s). -> version", r"(\b|^)vers?\.(\s|\)|$)", "version", repeat=True),
    fix("Extendet -> extended", r"(\b|^)extendet(\b)", "extended", repeat=True),
    fix("extd. -> extended", r"(\b|^)extd?\.?(\s|\)|$)", "extended", repeat=True),

    # featuring variants
    fix("/w -> ft.", r"(\s)/w(\s)", "ft.", repeat=True),
    fix("f. -> ft.", r"(\s)f\.(\s)", "ft.", repeat=True),
    fix("f/ -> ft.", r"(\s)f/(\s)", "ft.", repeat=True),
    fix("'featuring - ' -> feat", r"(\s)featuring -(\s)", "feat", repeat=True),

    fix("w/o -> without", r"(\b|^)w/o(\b)", "without", repeat=True),

    # vinyl
    fix("12'' -> 12\"", r"(\s|^|\()(\d+)''(\s|$)", '\\g<2>"', repeat=True),
    fix("12in -> 12\"", r"(\s|^|\()(\d+)in(?:ch)?(\s|$)", '\\g<2>"', repeat=True),

    # Combined words get a placeholder so the casing pass treats them as a
    # single token; POSTPROCESS_TITLES turns them back into text.
    fix("a cappella placeholder", r"(\b|^)a\s?c+ap+el+a(\b)", "a_cappella", repeat=True),
    fix("OC ReMix placeholder", r"(\b|^)oc\sremix(\b)", "oc_remix", repeat=True),
    fix("aka placeholder", r"(\b|^)aka(\b)", "a_k_a_", repeat=True),
    fix("a/k/a placeholder", r"(\b|^)a/k/a(\b)", "a_k_a_", repeat=True),
    fix("a.k.a. placeholder", r"(\b|^)a\.k\.a\.(\s|$)", "a_k_a_", repeat=True),

    # part/volume abbreviations
    fix("standalone Pt. -> Part", r"(^|\s)Pt\.?(\s|$)", "Part", repeat=True),
    fix("standalone Pts. -> Parts", r"(^|\s)Pts\.(\s|$)", "Parts", repeat=True),
    fix("standalone Vol. -> Volume", r"(^|\s)Vol\.(\s|$)", "Volume", repeat=True),

    # Get series numbers out of brackets:
    #   Name [Part 1]       -> Name Part 1
    #   Name (Parts 1-2)    -> Name Parts 1-2
    #   Name (Vol. x & y)   -> Name Volume x & y
    # The casing pass adds the comma in front of Part/Volume.
    fix("Pt -> Part",
        r"((?:,|\s|:|!)+)(?:Part|Pt)[.\s#]*((?:\d|[ivx]|[\-,&\s])+)(\s|:|$)",
        "Part \\g<2>"),
    fix("Pts -> Parts",
        r"((?:,|\s|:|!)+)(?:Parts|Pts)[.\s#]*((?:\d|[ivx]|[\-&,\s])+)(\s|:|$)",
        "Parts \\g<2>"),
    fix("Vol -> Volume",
        r"((?:,|\s|:|!)+)(?:Volume|Vol)[.\s#]*((?:\d|[ivx]|[\-&,\s])+)(\s|:|$)",
        "Volume \\g<2>"),
    fix("(Pt) -> Part",
        r"((?:,|\s|:|!)+)[(\[]\s*(?:Part|Pt)[.\s#]*((?:\d|[ivx]|[\-,&\s])+)[)\]](\s|:|$)",
        "Part \\g<2>"),
    fix("(Pts) -> Parts",
        r"((?:,|\s|:|!)+)[(\[]\s*(?:Parts|Pts)[.\s#]*((?:\d|[ivx]|[\-&,\s])+)[)\]](\s|:|$)",
        "Parts \\g<2>"),
    fix("(Vol) -> Volume",
        r"((?:,|\s|:|!)+)[(\[]\s*(?:Volume|Vol)[.\s#]*((?:\d|[ivx]|[\-&,\s])+)[)\]](\s|:|$)",
        "Volume \\g<2>"),
    fix(": Parts -> , parts", r"(\b|^): Parts(\b)", ", parts"),
    fix(": Part -> , part", r"(\b|^): Part(\b)", ", part"),
)

PREPROCESS_FIXLIST = PREPROCESS_COMMONS + PREPROCESS_TITLES

# ── Title post-processing ──────────────────────────────────────────────

POSTPROCESS_FIXLIST = (
    # placeholders from PREPROCESS_TITLES
    fix("a_cappella", r"(\b|^)a_cappella(\b)", "a cappella", flags=0, repeat=True),
    fix("A_cappella", r"(\b|^)A_cappella(\b)", "A Cappella", flags=0, repeat=True),
    fix("oc_remix", r"(\b|^)oc_remix(\b)", "OC ReMix", repeat=True),
    fix("re_edit", r"(\b|^)re_edit(\b)", "re-edit", flags=0, repeat=True),
    fix("Re_edit", r"(\b|^)Re_edit(\b)", "Re-edit", flags=0, repeat=True),
    fix("a.k.a. as first word", r"(^)A_k_a_(\b|$)", "A.k.a.", flags=0),
    fix("a.k.a. lowercase", r"(\b|^)a_k_a_(\b|$)", "a.k.a.", repeat=True),

    # "fe" is a lowercase word, but "Santa Fe" is common in song titles.
    fix("Santa Fe", r"(\b|^)Santa fe(\b|$)", "Santa Fe", flags=0, repeat=True),

    fix("whitespace in R&B", r"(\b|^)(?!(?-i:R&B)\b)r\s*&\s*b(\b)", "R&B", repeat=True),
    fix("[live] to (live)", r"(^|\s)\[(live)\](\s|$)", "(\\g<2>)", repeat=True),
    fix("Djs to DJs", r"(\b|^)(?!(?-i:DJs)\b)djs(\b)", "DJs", repeat=True),
    fix("Rock 'n' Roll", r"(\s|^)Rock '?n'? Roll(\s|$)", "Rock 'n' Roll"),
)
