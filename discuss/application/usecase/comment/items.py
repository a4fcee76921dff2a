"""Comment response items shared by comment use cases."""

from collections.abc import Iterator
from datetime import datetime
from itertools import islice
from typing import Any

from pydantic import BaseModel

from discuss.domain.model import Comment, ThreadNode

# Levels of nested "replies" in a ThreadItem, root included. Anything
# deeper is sent flat in "continued" and rebuilt from parent_id.
MAX_NESTED_DEPTH = 32


class AuthorItem(BaseModel):
    """Author display fields in responses."""

    user_id: str
    email: str
    pfp_url: str | None


def _comment_fields(comment: Comment) -> dict[str, Any]:
    return {
        "comment_id": str(comment.id),
        "content": None if comment.is_deleted else comment.content,
        "author": AuthorItem(
            user_id=str(comment.author.id),
            email=comment.author.email.root,
            pfp_url=comment.author.pfp_url,
        ),
        "parent_id": str(comment.parent_id) if comment.parent_id else None,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "deleted_at": comment.deleted_at,
    }


def _preorder(
    root: ThreadNode, max_depth: int | None = None
) -> Iterator[tuple[ThreadNode, int]]:
    """Yield (node, depth) parents first, siblings oldest first.

    Descent stops below max_depth when one is given.
    """
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if max_depth is None or depth < max_depth:
            stack.extend((reply, depth + 1) for reply in reversed(node.replies))


class CommentItem(BaseModel):
    """Comment item in responses.

    Tombstoned comments keep their place but their content is withheld.
    """

    comment_id: str
    content: str | None
    author: AuthorItem
    parent_id: str | None
    created_at: datetime
    updated_at: datetime | None
    deleted_at: datetime | None

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        """Convert domain Comment to response item."""
        return cls(**_comment_fields(comment))


class ThreadItem(CommentItem):
    """Comment with its nested replies.

    Nesting stops at MAX_NESTED_DEPTH. The item at that depth carries its
    whole remaining subtree in ``continued``, parents before children,
    each entry pointing at its parent through ``parent_id``.
    """

    replies: list["ThreadItem"]
    continued: list[CommentItem] = []

    @classmethod
    def from_node(cls, node: ThreadNode) -> "ThreadItem":
        """Convert a domain ThreadNode without recursing per level."""
        cutoff = MAX_NESTED_DEPTH - 1
        order = list(_preorder(node, max_depth=cutoff))

        # Reversed pre-order visits every child before its parent
        built: dict[int, ThreadItem] = {}
        for current, depth in reversed(order):
            if depth == cutoff:
                replies = []
                continued = [
                    CommentItem.from_domain(descendant.comment)
                    for descendant, _ in islice(_preorder(current), 1, None)
                ]
            else:
                replies = [built.pop(id(reply)) for reply in current.replies]
                continued = []
            built[id(current)] = cls(
                **_comment_fields(current.comment),
                replies=replies,
                continued=continued,
            )

        return built[id(node)]
