"""
API Dependencies

Catalog, randomness and clock injection. Tests override these through
``app.dependency_overrides``.
"""

import random
from datetime import date
from typing import List

from .models import MovieRecord
from .catalog import MOVIES


def get_movies() -> List[MovieRecord]:
    """Get the movie catalog."""
    return MOVIES


def get_rng() -> random.Random:
    """Random source for generated forecasts."""
    return random.Random()


def get_today() -> date:
    """Reference day; forecasts start the day after."""
    return date.today()
