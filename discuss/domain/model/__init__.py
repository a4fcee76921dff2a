"""Domain model entities for discussions."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.notification import Notification
from discuss.domain.model.thread import ThreadNode, ThreadsPage
from discuss.domain.model.user import User

__all__ = [
    "User",
    "Comment",
    "Notification",
    "ThreadNode",
    "ThreadsPage",
]
