from catalog.domain.models.cast_member import CastMember
from shared.abstracts.abstract_repository import SearchableRepository


class CastMemberRepository(SearchableRepository[CastMember]):
    model = CastMember
