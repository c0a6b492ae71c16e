"""Tests for mode lookup, descriptions and French spacing."""

import pytest

from guesscase.errors import InvalidModeError
from guesscase.modes import (
    ENGLISH,
    FRENCH,
    FRENCH_POSTPROCESS,
    MODES,
    SENTENCE,
    get_mode,
    render_description,
)
from guesscase.rules import apply_rules


class TestGetMode:
    def test_by_id(self):
        assert get_mode("English") is ENGLISH
        assert get_mode("french") is FRENCH
        assert get_mode(" SENTENCE ") is SENTENCE

    def test_mode_passes_through(self):
        assert get_mode(FRENCH) is FRENCH

    @pytest.mark.parametrize("bad", ["Klingon", "", None, 3])
    def test_unknown(self, bad):
        with pytest.raises(InvalidModeError) as exc:
            get_mode(bad)
        assert exc.value.mode_id == bad
        assert "English" in str(exc.value)

    def test_invalid_mode_is_value_error(self):
        with pytest.raises(ValueError):
            get_mode("Klingon")


class TestModes:
    def test_registry(self):
        assert list(MODES) == ["English", "French", "Sentence"]

    def test_sentence_caps(self):
        assert not ENGLISH.sentence_caps
        assert FRENCH.sentence_caps
        assert SENTENCE.sentence_caps

    def test_immutable(self):
        with pytest.raises(AttributeError):
            ENGLISH.sentence_caps = True


class TestRenderDescription:
    def test_plain_text_link(self):
        text = render_description(ENGLISH)
        assert "{url" not in text
        assert ("English capitalisation guidelines "
                "(https://musicbrainz.org/doc/Style/Language/English)") in text

    def test_html_link(self):
        text = render_description("French", '<a href="{url}" target="_blank">{text}</a>')
        assert ('<a href="https://musicbrainz.org/doc/Style/Language/French" '
                'target="_blank">French capitalisation guidelines</a>') in text

    def test_unknown_mode(self):
        with pytest.raises(InvalidModeError):
            render_description("Klingon")


class TestFrenchSpacing:
    @pytest.mark.parametrize("raw,expected", [
        ("Le freak; C'est chic", "Le freak ; C'est chic"),
        ("Quoi?!", "Quoi ?!"),
        ("Titre: sous-titre", "Titre : sous-titre"),
        ("«Bonjour»", "« Bonjour »"),
    ])
    def test_spaces_added(self, raw, expected):
        assert apply_rules(raw, FRENCH_POSTPROCESS) == expected

    @pytest.mark.parametrize("text", [
        "Le freak ; C'est chic",
        "« Bonjour »",
        "Rendez-vous à 3:45",
    ])
    def test_already_spaced_or_time(self, text):
        assert apply_rules(text, FRENCH_POSTPROCESS) == text
