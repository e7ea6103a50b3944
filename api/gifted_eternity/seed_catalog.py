"""
Gospel track catalog used to populate a fresh database.

Both seed variants (``seed`` through the ORM, ``seed_sql`` through raw SQL)
read the rows from here so they insert identical values.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import text
from sqlalchemy.engine import Connection

AUDIO_URL_PREFIX = "https://example.com/audio/"
COVER_ART_URL = "https://example.com/cover.jpg"

SEED_ALBUM_ID = 1
SEED_ALBUM_TITLE = "Hymns of Faith"

# Placeholder accounts the catalog is attributed to
PLACEHOLDER_ARTISTS: dict[int, str] = {
    1: "Damone Ward Sr.",
    2: "Gospel Choir",
    3: "Gospel Singers",
    4: "Gospel Ensemble",
}
DEFAULT_ARTIST_ID = 1

ARTIST_IDS: dict[str, int] = {name: artist_id for artist_id, name in PLACEHOLDER_ARTISTS.items()}

_WHITESPACE = re.compile(r"\s+")


class SeedTrack(BaseModel):
    """One literal catalog entry."""

    title: str = Field(..., min_length=1, max_length=255)
    artist: str = Field(..., min_length=1)
    album: str
    genre: str = Field(..., max_length=64)
    duration: int = Field(..., gt=0)  # seconds

    model_config = ConfigDict(frozen=True)


def artist_id_for(artist: str) -> int:
    """Exact name match; unknown artists fall back to the first placeholder."""
    return ARTIST_IDS.get(artist, DEFAULT_ARTIST_ID)


def audio_url_for(title: str) -> str:
    slug = _WHITESPACE.sub("-", title).lower()
    return f"{AUDIO_URL_PREFIX}{slug}.mp3"


def placeholder_open_id(artist_id: int) -> str:
    return f"seed-artist-{artist_id}"


def track_values(track: SeedTrack) -> dict[str, Any]:
    """Column values for one ``tracks`` row, keyed by ``Track`` attribute name."""
    return {
        "title": track.title,
        "artist_id": artist_id_for(track.artist),
        "album_id": SEED_ALBUM_ID,
        "genre": track.genre,
        "duration": track.duration,
        "audio_url": audio_url_for(track.title),
        "cover_art_url": COVER_ART_URL,
        "is_published": True,
    }


def advance_sequences(connection: Connection, tables: Iterable[str]) -> None:
    """Move PostgreSQL identity sequences past ids that were inserted explicitly."""
    if connection.dialect.name != "postgresql":
        return
    for table in tables:
        connection.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT COALESCE(MAX(id), 1) FROM \"{table}\"))"
            )
        )


def _track(title: str, artist: str, album: str, duration: int) -> SeedTrack:
    return SeedTrack(title=title, artist=artist, album=album, genre="Gospel", duration=duration)


GOSPEL_TRACKS: tuple[SeedTrack, ...] = (
    _track("Amazing Grace", "Damone Ward Sr.", "Hymns of Faith", 240),
    _track("How Great Thou Art", "Damone Ward Sr.", "Hymns of Faith", 260),
    _track("Jesus Loves Me", "Gospel Choir", "Spiritual Songs", 180),
    _track("I'll Fly Away", "Gospel Singers", "Heavenly Voices", 220),
    _track("Oh Happy Day", "Gospel Ensemble", "Joyful Praise", 200),
    _track("Swing Low Sweet Chariot", "Gospel Choir", "Spiritual Songs", 240),
    _track("Wade in the Water", "Gospel Singers", "Heavenly Voices", 210),
    _track("Go Down Moses", "Gospel Ensemble", "Joyful Praise", 230),
    _track("Blessed Assurance", "Damone Ward Sr.", "Hymns of Faith", 250),
    _track("Jesus Christ is Risen Today", "Gospel Choir", "Spiritual Songs", 270),
    _track("The Old Rugged Cross", "Gospel Singers", "Heavenly Voices", 240),
    _track("Just As I Am", "Gospel Ensemble", "Joyful Praise", 220),
    _track("Nearer My God to Thee", "Damone Ward Sr.", "Hymns of Faith", 260),
    _track("Rock of Ages", "Gospel Choir", "Spiritual Songs", 230),
    _track("What a Friend We Have in Jesus", "Gospel Singers", "Heavenly Voices", 250),
    _track("Jesus Paid It All", "Gospel Ensemble", "Joyful Praise", 240),
    _track("At the Cross", "Damone Ward Sr.", "Hymns of Faith", 220),
    _track("It Is Well", "Gospel Choir", "Spiritual Songs", 210),
    _track("Great Is Thy Faithfulness", "Gospel Singers", "Heavenly Voices", 260),
    _track("Jesus Loves the Little Children", "Gospel Ensemble", "Joyful Praise", 180),
    _track("Precious Jesus", "Damone Ward Sr.", "Hymns of Faith", 240),
    _track("Hallelujah", "Gospel Choir", "Spiritual Songs", 200),
    _track("Glory to God", "Gospel Singers", "Heavenly Voices", 230),
    _track("Holy Holy Holy", "Gospel Ensemble", "Joyful Praise", 250),
    _track("Praise God from Whom All Blessings Flow", "Damone Ward Sr.", "Hymns of Faith", 220),
    _track("Crown Him with Many Crowns", "Gospel Choir", "Spiritual Songs", 240),
    _track("O Come All Ye Faithful", "Gospel Singers", "Heavenly Voices", 260),
    _track("Joy to the World", "Gospel Ensemble", "Joyful Praise", 230),
    _track("Silent Night", "Damone Ward Sr.", "Hymns of Faith", 210),
    _track("O Little Town of Bethlehem", "Gospel Choir", "Spiritual Songs", 240),
    _track("Hark the Herald Angels Sing", "Gospel Singers", "Heavenly Voices", 250),
    _track("O Come O Come Emmanuel", "Gospel Ensemble", "Joyful Praise", 220),
    _track("Angels We Have Heard on High", "Damone Ward Sr.", "Hymns of Faith", 240),
    _track("It Came Upon a Midnight Clear", "Gospel Choir", "Spiritual Songs", 230),
    _track("Deck the Halls", "Gospel Singers", "Heavenly Voices", 210),
    _track("God Rest Ye Merry Gentlemen", "Gospel Ensemble", "Joyful Praise", 240),
    _track("We Three Kings", "Damone Ward Sr.", "Hymns of Faith", 260),
    _track("O Sanctissima", "Gospel Choir", "Spiritual Songs", 220),
    _track("Gaudete", "Gospel Singers", "Heavenly Voices", 200),
    _track("Carol of the Bells", "Gospel Ensemble", "Joyful Praise", 230),
    _track("The First Noel", "Damone Ward Sr.", "Hymns of Faith", 250),
    _track("What Child Is This", "Gospel Choir", "Spiritual Songs", 240),
    _track("Good Christian Men Rejoice", "Gospel Singers", "Heavenly Voices", 220),
    _track("Ding Dong Merrily on High", "Gospel Ensemble", "Joyful Praise", 210),
    _track("O Come All Ye Faithful (Reprise)", "Damone Ward Sr.", "Hymns of Faith", 240),
    _track("Adeste Fideles", "Gospel Choir", "Spiritual Songs", 260),
    _track("Veni Veni Emmanuel", "Gospel Singers", "Heavenly Voices", 230),
    _track("Christus Natus Est", "Gospel Ensemble", "Joyful Praise", 250),
    _track("Gloria in Excelsis Deo", "Damone Ward Sr.", "Hymns of Faith", 220),
    _track("Magnificat", "Gospel Choir", "Spiritual Songs", 240),
)
