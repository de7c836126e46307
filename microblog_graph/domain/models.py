"""
Domain models - Friendship between the authenticated account and another account
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from enum import Enum
import logging

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import NotPopulated

logger = logging.getLogger(__name__)

MAX_ACCOUNT_ID = 2**63 - 1

FIELD_NAMES = ("id", "name", "screen_name", "followed_by", "following")


class RelationshipType(str, Enum):
    """Relationship seen from the authenticated account"""
    FOLLOWING = "following"  # We follow them
    FOLLOWED_BY = "followed_by"  # They follow us
    MUTUAL = "mutual"
    NONE = "none"

    @classmethod
    def from_flags(cls, followed_by: bool, following: bool) -> "RelationshipType":
        if followed_by and following:
            return cls.MUTUAL
        if following:
            return cls.FOLLOWING
        if followed_by:
            return cls.FOLLOWED_BY
        return cls.NONE


class Friendship(ABC):
    """Accessor contract shared by populated and placeholder friendships"""

    @abstractmethod
    def get_id(self) -> int:
        """Identifier of the other account"""

    @abstractmethod
    def get_name(self) -> str:
        """Display name of the other account"""

    @abstractmethod
    def get_screen_name(self) -> str:
        """Handle of the other account"""

    @abstractmethod
    def is_followed_by(self) -> bool:
        """Whether the other account follows the authenticated account"""

    @abstractmethod
    def is_following(self) -> bool:
        """Whether the authenticated account follows the other account"""

    def relationship(self) -> RelationshipType:
        return RelationshipType.from_flags(self.is_followed_by(), self.is_following())

    def is_mutual(self) -> bool:
        return self.relationship() == RelationshipType.MUTUAL


class FriendshipRecord(BaseModel, Friendship):
    """
    Fully populated friendship

    All five values are required at construction, so every accessor is total.
    A changed relationship is a new record, see with_relationship().
    """
    model_config = ConfigDict(frozen=True, strict=True)

    id: int = Field(..., ge=0, le=MAX_ACCOUNT_ID)
    name: str
    screen_name: str = Field(..., min_length=1)
    followed_by: bool
    following: bool

    def model_post_init(self, context: Any) -> None:
        logger.debug(f"Built friendship record for {self}")

    def get_id(self) -> int:
        return self.id

    def get_name(self) -> str:
        return self.name

    def get_screen_name(self) -> str:
        return self.screen_name

    def is_followed_by(self) -> bool:
        return self.followed_by

    def is_following(self) -> bool:
        return self.following

    def with_relationship(
        self,
        *,
        followed_by: Optional[bool] = None,
        following: Optional[bool] = None,
    ) -> "FriendshipRecord":
        """
        Build a new record with updated follow flags

        Args:
            followed_by: New followed-by flag, None keeps the current one
            following: New following flag, None keeps the current one

        Returns:
            A new FriendshipRecord; this record is left unchanged
        """
        values = self.model_dump()
        if followed_by is not None:
            values["followed_by"] = followed_by
        if following is not None:
            values["following"] = following
        return FriendshipRecord(**values)

    def __str__(self) -> str:
        return f"@{self.screen_name} ({self.name})"


class UnpopulatedFriendship(BaseModel, Friendship):
    """
    Placeholder friendship that may hold partial data

    Reading an absent value raises NotPopulated. Use to_record() to obtain a
    FriendshipRecord once every value is known.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    id: Optional[int] = Field(None, ge=0, le=MAX_ACCOUNT_ID)
    name: Optional[str] = None
    screen_name: Optional[str] = Field(None, min_length=1)
    followed_by: Optional[bool] = None
    following: Optional[bool] = None

    def _require(self, field: str) -> Any:
        value = getattr(self, field)
        if value is None:
            logger.debug(f"Read of '{field}' on unpopulated friendship")
            raise NotPopulated(field)
        return value

    def get_id(self) -> int:
        return self._require("id")

    def get_name(self) -> str:
        return self._require("name")

    def get_screen_name(self) -> str:
        return self._require("screen_name")

    def is_followed_by(self) -> bool:
        return self._require("followed_by")

    def is_following(self) -> bool:
        return self._require("following")

    def missing_fields(self) -> List[str]:
        """Names of absent values, in declaration order"""
        return [field for field in FIELD_NAMES if getattr(self, field) is None]

    def is_populated(self) -> bool:
        return not self.missing_fields()

    def to_record(self) -> FriendshipRecord:
        """
        Convert to a FriendshipRecord

        Raises:
            NotPopulated: If any value is still absent
        """
        missing = self.missing_fields()
        if missing:
            logger.debug(f"Cannot complete friendship, missing {missing}")
            raise NotPopulated(*missing)
        return FriendshipRecord(**self.model_dump())
