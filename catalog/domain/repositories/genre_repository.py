from catalog.domain.models.genre import Genre
from shared.abstracts.abstract_repository import SearchableRepository


class GenreRepository(SearchableRepository[Genre]):
    model = Genre
