"""
Exceptions raised by Microblog Graph
"""
from typing import Tuple


class MicroblogGraphError(Exception):
    """Base class for library errors"""


class NotPopulated(MicroblogGraphError):
    """An accessor was read on a friendship that lacks the value"""

    def __init__(self, *fields: str):
        self.fields: Tuple[str, ...] = fields
        super().__init__(f"Friendship is not populated: missing {', '.join(fields)}")
