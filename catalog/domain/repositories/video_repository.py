from catalog.domain.models.video import Video
from shared.abstracts.abstract_repository import SearchableRepository


class VideoRepository(SearchableRepository[Video]):
    model = Video
