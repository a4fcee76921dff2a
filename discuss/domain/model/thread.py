"""Thread structures assembled per request.

Nothing here is persisted: threads are rebuilt from freshly fetched
comment rows on every read.
"""

from dataclasses import dataclass, field

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId


@dataclass
class ThreadNode:
    """A comment and its replies, siblings in chronological order.

    A ThreadNode whose comment has no parent is a thread.
    """

    comment: Comment
    replies: list["ThreadNode"] = field(default_factory=list)

    def count_nodes(self) -> int:
        """Number of comments in this subtree, including this one."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.replies)
        return count


@dataclass
class ThreadsPage:
    """One page of threads selected under a size budget.

    remaining_count is computed against this page only; it is not a
    running total across successive pages.
    """

    threads: list[ThreadNode]
    total_comment_count: int
    remaining_count: int
    next_cursor: CommentId | None
