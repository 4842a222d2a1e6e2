from catalog.domain.entities.category import CategoryCreate, CategoryUpdate
from catalog.domain.entities.genre import GenreCreate, GenreUpdate
from catalog.domain.entities.cast_member import CastMemberCreate, CastMemberUpdate
from catalog.domain.entities.video import VideoCreate, VideoUpdate
