"""Entity identifiers.

All ids are UUIDs; the NewTypes keep a user id from being passed where a
comment id is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
