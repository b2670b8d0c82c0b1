"""
Movies API

Read-only access to the static movie catalog.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from .models import MovieRecord
from .catalog import find_movie
from .deps import get_movies


router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=List[MovieRecord], operation_id="GetMovies")
async def list_movies(movies: List[MovieRecord] = Depends(get_movies)):
    """List the whole catalog."""
    return movies


@router.get("/{movie_id}", response_model=Optional[MovieRecord], operation_id="GetMoviesById")
async def get_movie(movie_id: int, movies: List[MovieRecord] = Depends(get_movies)):
    """Get single movie by ID. Unknown IDs yield null."""
    return find_movie(movies, movie_id)
