import logging

import pytest

from microblog_graph import FriendshipRecord, UnpopulatedFriendship


@pytest.fixture
def ada():
    """Ada follows us, we do not follow Ada"""
    return FriendshipRecord(
        id=42,
        name="Ada",
        screen_name="ada",
        followed_by=True,
        following=False,
    )


@pytest.fixture
def identity_only():
    """Placeholder with identity data but no relationship flags"""
    return UnpopulatedFriendship(id=7, name="Grace", screen_name="grace")


@pytest.fixture
def restore_root_logging():
    """Undo configure_logging() changes to the root logger after each test"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
