"""Event attribute features.

Content-rating and genre parsing for showtime records.
"""

# Estonian content-rating labels to minimum age
RATING_MIN_AGE: dict[str, float] = {
    "Lubatud kõigile": 0.0,
    "Perefilm": 0.0,
    "Alla 6 a. mittesoovitatav": 6.0,
    "Alla 12 a. mittesoovitatav": 12.0,
    "Alla 12 a. keelatud": 12.0,
    "Alla 14 a. keelatud": 14.0,
    "Alla 16 a. keelatud": 16.0,
    "Alla 18 a. keelatud": 18.0,
}

UNKNOWN_RATING_AGE = 0.0

GENRE_SEPARATOR = ", "


def encode_rating(rating: str | None) -> float:
    """Map a content-rating label to its minimum age.

    Unknown labels map to 0.0, which therefore does not imply that the
    event is unrestricted.
    """
    return RATING_MIN_AGE.get(rating or "", UNKNOWN_RATING_AGE)


def parse_genres(genres: str | None) -> tuple[str, ...]:
    """Split a genre list such as "Action, Comedy" into its labels.

    Empty entries are dropped and repeats are kept.
    """
    if not genres or not isinstance(genres, str):
        return ()
    return tuple(
        genre
        for genre in (part.strip() for part in genres.split(GENRE_SEPARATOR))
        if genre
    )
