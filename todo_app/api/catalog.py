"""
Movie Catalog

Fixed list of movies served by the API. Never mutated.
"""

from typing import List, Optional

from .models import MovieRecord


LOREM_SHORT = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Vestibulum vitae nunc risus. "
LOREM_LONG = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Vestibulum vitae nunc risus. "
    "Cras sed ex augue. Etiam rutrum massa at enim sollicitudin scelerisque. "
    "Pellentesque dignissim, velit vitae lacinia"
)


def _movie(movie_id: int, title: str, image: str) -> MovieRecord:
    return MovieRecord(
        id=movie_id,
        title=title,
        description=LOREM_SHORT,
        image_url=f"/images/movies/{image}.png",
        review=LOREM_LONG,
    )


MOVIES: List[MovieRecord] = [
    _movie(1, "Highlander", "Highlander"),
    _movie(2, "Godfather", "Godfather"),
    _movie(3, "Last of the Mohicans", "LastOfTheMohicans"),
    _movie(4, "Rear Window", "RearWindow"),
    _movie(5, "Road House", "RoadHouse"),
    _movie(6, "Star Treck IV", "StarTreck4"),
]


def find_movie(movies: List[MovieRecord], movie_id: int) -> Optional[MovieRecord]:
    """Return the movie with ``movie_id``, or None."""
    return next((m for m in movies if m.id == movie_id), None)
