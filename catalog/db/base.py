from catalog.db.base_class import Base

# Import ALL models so SQLAlchemy registers them
from catalog.models.movie_list import MovieListItem, MovieListSnapshot  # noqa: F401
