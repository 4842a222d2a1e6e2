from catalog.domain.repositories.category_repository import CategoryRepository
from catalog.domain.repositories.genre_repository import GenreRepository
from catalog.domain.repositories.cast_member_repository import CastMemberRepository
from catalog.domain.repositories.video_repository import VideoRepository

__all__ = ["CategoryRepository", "GenreRepository", "CastMemberRepository", "VideoRepository"]
