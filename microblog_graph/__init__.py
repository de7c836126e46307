"""
Microblog Graph - follow relationship model for microblogging clients
"""
from .config import Settings, settings
from .domain import (
    Friendship,
    FriendshipRecord,
    RelationshipType,
    UnpopulatedFriendship,
)
from .exceptions import MicroblogGraphError, NotPopulated
from .log import configure_logging


__all__ = [
    # config.py
    "Settings",
    "settings",
    # domain/models.py
    "Friendship",
    "FriendshipRecord",
    "RelationshipType",
    "UnpopulatedFriendship",
    # exceptions.py
    "MicroblogGraphError",
    "NotPopulated",
    # log.py
    "configure_logging",
]
