"""Preview guess case on a MusicBrainz release.

Fetches the release title and its track titles, and pairs each one with
its normalized form.  Nothing is written back to MusicBrainz.
"""

import time

import musicbrainzngs

from guesscase.config import (
    MUSICBRAINZ_APP,
    MUSICBRAINZ_CONTACT,
    MUSICBRAINZ_RATE_LIMIT,
    VERSION,
)
from guesscase.normalize import guess_case

# Set up the client once at import time
musicbrainzngs.set_useragent(MUSICBRAINZ_APP, VERSION, MUSICBRAINZ_CONTACT)


def _rate_limit():
    """Sleep to respect MusicBrainz rate limit."""
    if MUSICBRAINZ_RATE_LIMIT > 0:
        time.sleep(MUSICBRAINZ_RATE_LIMIT)


def _get_release_details(release_mbid):
    """Fetch a release with its media and tracks."""
    _rate_limit()
    return musicbrainzngs.get_release_by_id(
        release_mbid,
        includes=["recordings", "media"],
    )["release"]


def fetch_release_titles(release_mbid):
    """Return (release_title, rows) where rows are (disc, position, title).

    The track title is preferred over the recording title.
    """
    release = _get_release_details(release_mbid)
    rows = []
    for medium in release.get("medium-list", []):
        disc = int(medium.get("position", 1))
        for track in medium.get("track-list", []):
            recording = track.get("recording", {})
            title = track.get("title") or recording.get("title", "")
            position = track.get("number") or track.get("position", "")
            rows.append((disc, str(position), title))
    return release.get("title", ""), rows


def preview_release(release_mbid, mode, options=None):
    """Guess case for every title of a release.

    Returns a list of dicts with keys: disc, position, original, guessed,
    faults.  The release title comes first with disc and position None.
    """
    release_title, rows = fetch_release_titles(release_mbid)
    preview = []
    for disc, position, title in [(None, None, release_title)] + rows:
        result = guess_case(title, mode, options)
        preview.append({
            "disc": disc,
            "position": position,
            "original": title,
            "guessed": result.title,
            "faults": result.faults,
        })
    return preview
