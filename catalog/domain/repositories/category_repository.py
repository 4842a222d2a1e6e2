from catalog.domain.models.category import Category
from shared.abstracts.abstract_repository import SearchableRepository


class CategoryRepository(SearchableRepository[Category]):
    model = Category
