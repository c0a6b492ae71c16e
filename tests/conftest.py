"""Shared fixtures for guesscase tests."""

import pytest

from guesscase.casing import case_words
from guesscase.config import DEFAULT_OPTIONS, Options
from guesscase.context import CaseContext
from guesscase.modes import ENGLISH
from guesscase.preprocess import split_words


@pytest.fixture
def no_roman():
    """Options with roman numeral uppercasing turned off."""
    return Options(uppercase_roman_numerals=False)


@pytest.fixture
def run_casing():
    """Run only the casing pass; returns (output, context)."""
    def run(title, mode=ENGLISH, options=DEFAULT_OPTIONS):
        ctx = CaseContext(mode, options)
        return case_words(split_words(title), ctx), ctx
    return run


@pytest.fixture(autouse=True)
def no_rate_limit(monkeypatch):
    """Never sleep between (mocked) MusicBrainz requests."""
    monkeypatch.setattr("guesscase.musicbrainz.MUSICBRAINZ_RATE_LIMIT", 0)
