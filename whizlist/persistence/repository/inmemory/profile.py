"""In-memory profile repository for testing."""

from typing import Optional, Sequence

from whizlist.domain.model.profile import Profile
from whizlist.domain.repository.profile import ProfileRepository
from whizlist.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        return self._profiles.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[Profile]:
        return [self._profiles[uid] for uid in user_ids if uid in self._profiles]

    async def save(self, profile: Profile) -> Profile:
        self._profiles[profile.id] = profile
        return profile
