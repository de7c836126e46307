from .models import (
    Friendship,
    FriendshipRecord,
    RelationshipType,
    UnpopulatedFriendship,
)


__all__ = [
    "Friendship",
    "FriendshipRecord",
    "RelationshipType",
    "UnpopulatedFriendship",
]
