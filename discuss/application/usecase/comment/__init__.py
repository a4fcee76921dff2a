"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .edit_comment import EditCommentRequest, EditCommentUseCase
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .get_threads import GetThreadsRequest, GetThreadsResponse, GetThreadsUseCase
from .items import AuthorItem, CommentItem, ThreadItem
from .restore_comment import RestoreCommentRequest, RestoreCommentUseCase

__all__ = [
    "AuthorItem",
    "CommentItem",
    "ThreadItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "GetThreadsRequest",
    "GetThreadsResponse",
    "GetThreadsUseCase",
    "RestoreCommentRequest",
    "RestoreCommentUseCase",
]
