"""Thread assembly and size-budget pagination."""

from typing import Sequence

import logfire

from discuss.domain.error import ValidationError
from discuss.domain.model.comment import Comment
from discuss.domain.model.thread import ThreadNode, ThreadsPage
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId

from .base import Service


def build_thread_tree(comments: Sequence[Comment]) -> tuple[list[ThreadNode], int]:
    """Build nested reply trees from a flat comment list.

    Algorithm:
    1. Allocate one empty node per comment, keyed by comment ID
    2. Walk the input in order, appending each node to its parent's
       replies, or to the roots when the parent is not in the input

    Input order is preserved, so chronological input yields
    chronologically ordered siblings and roots without sorting. A reply
    whose parent is missing from the input becomes a root of its own.

    Args:
        comments: Comments in created_at ascending order

    Returns:
        Tuple of (root nodes, number of comments in the input)
    """
    nodes: dict[CommentId, ThreadNode] = {
        comment.id: ThreadNode(comment=comment) for comment in comments
    }

    roots: list[ThreadNode] = []
    for comment in comments:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is not None:
            parent.replies.append(node)
        else:
            roots.append(node)

    return roots, len(comments)


class ThreadService(Service):
    """Domain service for reading comment threads."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def assemble_thread(
        self, root_id: CommentId
    ) -> tuple[ThreadNode | None, int]:
        """Assemble one thread with all of its non-deleted replies.

        The whole subtree is fetched in a single call because its size
        decides whether it fits a page.

        Args:
            root_id: ID of the thread's root comment

        Returns:
            Tuple of (thread, size); (None, 0) if the root is gone or deleted
        """
        with logfire.span("thread_service.assemble_thread", root_id=str(root_id)):
            comments = await self.comment_repository.find_descendants(root_id)
            if not comments:
                logfire.info("Thread root missing or deleted", root_id=str(root_id))
                return None, 0

            roots, _ = build_thread_tree(comments)
            thread = next((node for node in roots if node.comment.id == root_id), None)
            if thread is None or len(roots) > 1:
                logfire.warn(
                    "Descendant set did not form a single tree",
                    root_id=str(root_id),
                    root_count=len(roots),
                )
            if thread is None:
                return None, 0

            # Only nodes reachable from the root are emitted, so only they count
            return thread, thread.count_nodes()

    async def paginate_threads(
        self, limit: int, cursor: CommentId | None = None
    ) -> ThreadsPage:
        """Select the next threads that fit a comment budget.

        Algorithm:
        1. Resolve the cursor to its created_at (ignored if missing or deleted)
        2. Fetch top-level candidate IDs after that instant, oldest first
        3. Assemble candidates in order, skipping ones deleted meanwhile
        4. Take a thread while the running total stays within the limit;
           the first thread is always taken, even when it alone exceeds it
        5. Stop at the first thread that does not fit, or once the
           running total reaches the limit

        Later, smaller threads are never pulled forward to fill the gap:
        pages stay strictly chronological.

        Args:
            limit: Comment budget for the page (>= 1)
            cursor: ID of the last thread root of the previous page

        Returns:
            Page with threads, counts and the cursor for the next page

        Raises:
            ValidationError: If limit is below 1
        """
        if limit < 1:
            raise ValidationError(f"limit must be at least 1, got {limit}")

        with logfire.span(
            "thread_service.paginate_threads",
            limit=limit,
            cursor=str(cursor) if cursor else None,
        ):
            after = None
            if cursor is not None:
                cursor_comment = await self.comment_repository.find_by_id(cursor)
                if cursor_comment and not cursor_comment.is_deleted:
                    after = cursor_comment.created_at
                else:
                    logfire.info(
                        "Cursor not resolvable, starting from the beginning",
                        cursor=str(cursor),
                    )

            candidate_ids = await self.comment_repository.find_top_level_after(after)

            running_total = 0
            selected: list[ThreadNode] = []
            for root_id in candidate_ids:
                thread, size = await self.assemble_thread(root_id)
                if thread is None:
                    continue

                if selected and running_total + size > limit:
                    break

                selected.append(thread)
                running_total += size
                if running_total >= limit:
                    break

            total_comment_count = await self.comment_repository.count_non_deleted()
            next_cursor = selected[-1].comment.id if selected else None

            logfire.info(
                "Threads paginated",
                candidates=len(candidate_ids),
                threads=len(selected),
                comments=running_total,
                total=total_comment_count,
            )
            return ThreadsPage(
                threads=selected,
                total_comment_count=total_comment_count,
                remaining_count=total_comment_count - running_total,
                next_cursor=next_cursor,
            )
