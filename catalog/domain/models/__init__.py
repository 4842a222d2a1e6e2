from catalog.domain.models.category import Category
from catalog.domain.models.genre import Genre
from catalog.domain.models.cast_member import CastMember, CastMemberType
from catalog.domain.models.video import Video, Rating

__all__ = ["Category", "Genre", "CastMember", "CastMemberType", "Video", "Rating"]
