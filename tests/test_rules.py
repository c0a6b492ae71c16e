"""Tests for the rule engine and the shared fixlists."""

import pytest

from guesscase.errors import MalformedRuleFault
from guesscase.rules import (
    POSTPROCESS_FIXLIST,
    PREPROCESS_FIXLIST,
    apply_rule,
    apply_rules,
    fix,
)


class TestFix:
    def test_builds_rule(self):
        rule = fix("re-mix -> remix", r"(\b|^)re-mix(\b)", "remix")
        assert rule.name == "re-mix -> remix"
        assert rule.repeat is False
        assert rule.pattern.search("RE-MIX")

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            fix("", r"x", "y")


class TestApplyRule:
    """Splicing and repeat semantics."""

    def test_first_match_only(self):
        rule = fix("foo", r"(\b|^)foo(\b)", "bar")
        assert apply_rule("foo foo", rule) == "bar foo"

    def test_repeat_replaces_all(self):
        rule = fix("foo", r"(\b|^)foo(\b)", "bar", repeat=True)
        assert apply_rule("foo foo foo", rule) == "bar bar bar"

    def test_first_and_last_group_spliced(self):
        rule = fix("f. -> ft.", r"(\s)f\.(\s)", "ft.")
        assert apply_rule("Song f. Guest", rule) == "Song ft. Guest"

    def test_single_group_keeps_head_only(self):
        rule = fix("trim", r"(x)\s+", "")
        assert apply_rule("x   y", rule) == "xy"

    def test_replacement_references_group(self):
        rule = fix("12''", r"(\s|^|\()(\d+)''(\s|$)", '\\g<2>"')
        assert apply_rule("Track 12'' mix", rule) == 'Track 12" mix'

    def test_no_match_unchanged(self):
        rule = fix("foo", r"(\b|^)foo(\b)", "bar", repeat=True)
        assert apply_rule("nothing here", rule) == "nothing here"


class TestMalformedRule:
    def test_looping_rule_is_cut_off(self):
        faults = []
        rule = fix("loop", r"a", "a", repeat=True)
        assert apply_rule("banana", rule, faults) == "banana"
        assert len(faults) == 1
        assert isinstance(faults[0], MalformedRuleFault)
        assert faults[0].rule_name == "loop"

    def test_without_fault_list(self):
        rule = fix("loop", r"a", "a", repeat=True)
        assert apply_rule("banana", rule) == "banana"

    def test_later_rules_still_run(self):
        faults = []
        rules = (
            fix("loop", r"a", "a", repeat=True),
            fix("n -> m", r"n", "m", repeat=True),
        )
        assert apply_rules("banana", rules, faults) == "bamama"
        assert len(faults) == 1


class TestRuleOrder:
    def test_order_matters(self):
        remix = fix("re-mix -> remix", r"(\b|^)re-mix(\b)", "remix")
        tag = fix("remix -> tag", r"(\b|^)remix(\b)", "rmx_tag")
        assert apply_rules("re-mix", (remix, tag)) == "rmx_tag"
        assert apply_rules("re-mix", (tag, remix)) == "remix"


class TestPreprocessFixlist:
    """Spot checks of the shared pre-processing rules."""

    @pytest.mark.parametrize("raw,expected", [
        ("Disco (Re-Mix)", "Disco (remix)"),
        ("Song (  live )", "Song (live)"),
        ("Song RMX", "Song remix"),
        ("D.J. Shadow", "DJ Shadow"),
        ("Song f. Guest", "Song ft. Guest"),
        ("Song w/o Words", "Song without Words"),
        ("Track 12in mix", 'Track 12" mix'),
        ("Foo aka Bar", "Foo a_k_a_ Bar"),
        ("Foo a/k/a Bar", "Foo a_k_a_ Bar"),
        ("Song a capella", "Song a_cappella"),
        ("Song re-edit", "Song re_edit"),
        ("Song (orig. mix)", "Song (original mix)"),
    ])
    def test_fixes(self, raw, expected):
        assert apply_rules(raw, PREPROCESS_FIXLIST) == expected

    def test_standalone_part(self):
        assert apply_rules("Name Pt. 2", PREPROCESS_FIXLIST) == "Name Part 2"

    def test_volume(self):
        assert apply_rules("Name Vol. 3", PREPROCESS_FIXLIST) == "Name Volume 3"

    def test_part_out_of_brackets(self):
        assert apply_rules("Name (Part 1)", PREPROCESS_FIXLIST) == "Name Part 1"


class TestPostprocessFixlist:
    @pytest.mark.parametrize("raw,expected", [
        ("Song (A_cappella)", "Song (A Cappella)"),
        ("Song a_cappella", "Song a cappella"),
        ("Oc_remix", "OC ReMix"),
        ("Song (Re_edit)", "Song (Re-edit)"),
        ("Foo a_k_a_ Bar", "Foo a.k.a. Bar"),
        ("A_k_a_ Bar", "A.k.a. Bar"),
        ("Welcome to Santa fe", "Welcome to Santa Fe"),
        ("R & B Hits", "R&B Hits"),
        ("Song [Live]", "Song (Live)"),
        ("Djs of the World", "DJs of the World"),
        ("Rock n Roll", "Rock 'n' Roll"),
    ])
    def test_fixes(self, raw, expected):
        assert apply_rules(raw, POSTPROCESS_FIXLIST) == expected

    def test_correct_text_untouched(self):
        faults = []
        text = "R&B DJs Rock 'n' Roll"
        assert apply_rules(text, POSTPROCESS_FIXLIST, faults) == text
        assert faults == []
