"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .mutation_guard import MutationGuard
from .notification_service import NotificationService
from .thread_service import ThreadService, build_thread_tree

__all__ = [
    "CommentService",
    "JWTService",
    "MutationGuard",
    "NotificationService",
    "Service",
    "ThreadService",
    "build_thread_tree",
]
