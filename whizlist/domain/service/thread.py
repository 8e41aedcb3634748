"""Comment thread construction.

Comments are stored flat with a nullable parent_id. These helpers rebuild
the reply tree, answer depth questions about it and locate subtrees. All
of them are pure; the caller owns loading and caching.
"""

from collections import defaultdict
from typing import Iterator, Optional, Sequence

from whizlist.domain.error import NotFoundError
from whizlist.domain.model.comment import AnnotatedComment, CommentNode
from whizlist.domain.value import CommentId


def build_thread(items: Sequence[AnnotatedComment]) -> list[CommentNode]:
    """Build the reply tree for a flat set of annotated comments.

    Algorithm:
    1. Index every comment by ID (first occurrence wins on duplicates)
    2. Attach each comment to its parent when the parent is in the index,
       otherwise promote it to a root
    3. Build subtrees from the roots, sorting every sibling list by
       created_at (stable, so ties keep input order)
    4. Any comment still unreached sits on a parent cycle; the earliest
       of them becomes a root so that no comment is lost

    Args:
        items: Annotated comments in load order

    Returns:
        Root nodes sorted chronologically, each comment appearing exactly once
    """
    arena: dict[CommentId, AnnotatedComment] = {}
    order: list[CommentId] = []
    for item in items:
        if item.comment.id not in arena:
            arena[item.comment.id] = item
            order.append(item.comment.id)

    children: dict[CommentId, list[CommentId]] = defaultdict(list)
    root_ids: list[CommentId] = []
    for comment_id in order:
        parent_id = arena[comment_id].comment.parent_id
        if parent_id is not None and parent_id != comment_id and parent_id in arena:
            children[parent_id].append(comment_id)
        else:
            root_ids.append(comment_id)

    def chronological(ids: list[CommentId]) -> list[CommentId]:
        return sorted(ids, key=lambda cid: arena[cid].comment.created_at)

    visited: set[CommentId] = set()

    def build_subtree(comment_id: CommentId) -> CommentNode:
        visited.add(comment_id)
        replies = [
            build_subtree(child_id)
            for child_id in chronological(children.get(comment_id, []))
            if child_id not in visited
        ]
        item = arena[comment_id]
        return CommentNode(
            comment=item.comment,
            author=item.author,
            like_count=item.like_count,
            is_liked_by_user=item.is_liked_by_user,
            replies=replies,
        )

    roots = [build_subtree(root_id) for root_id in root_ids]

    unreached = [cid for cid in order if cid not in visited]
    while unreached:
        roots.append(build_subtree(chronological(unreached)[0]))
        unreached = [cid for cid in unreached if cid not in visited]

    return sorted(roots, key=lambda node: node.comment.created_at)


def walk(roots: Sequence[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Yield every node with its 0-based depth in pre-order."""
    stack = [(node, 0) for node in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))


def flatten(roots: Sequence[CommentNode]) -> list[CommentNode]:
    """All nodes of a thread in pre-order."""
    return [node for node, _ in walk(roots)]


def find_node(
    roots: Sequence[CommentNode], comment_id: CommentId
) -> Optional[CommentNode]:
    """Find a node anywhere in a thread."""
    for node, _ in walk(roots):
        if node.id == comment_id:
            return node
    return None


def subtree_ids(roots: Sequence[CommentNode], comment_id: CommentId) -> set[CommentId]:
    """IDs of a comment and all of its descendants.

    Returns:
        Empty set when the comment is not in the thread
    """
    node = find_node(roots, comment_id)
    if node is None:
        return set()
    return {descendant.id for descendant in flatten([node])}


def ancestry(
    roots: Sequence[CommentNode], comment_id: CommentId
) -> Optional[list[CommentId]]:
    """Path of IDs from the root down to the comment itself.

    The depth of the comment is len(path) - 1.
    """
    stack: list[tuple[CommentNode, list[CommentId]]] = [
        (node, [node.id]) for node in reversed(roots)
    ]
    while stack:
        node, path = stack.pop()
        if node.id == comment_id:
            return path
        stack.extend((reply, path + [reply.id]) for reply in reversed(node.replies))
    return None


def reply_parent(
    roots: Sequence[CommentNode],
    clicked_id: CommentId,
    max_depth: int = 3,
) -> Optional[CommentId]:
    """Decide which comment a reply should attach to.

    Replies live at depths 0..max_depth-1. Replying to a comment above the
    deepest level attaches to it; replying at the deepest level (or below,
    for rows created elsewhere) attaches to the ancestor at depth
    max_depth - 2 so the new reply lands on the deepest visible level.

    Args:
        roots: Built thread
        clicked_id: Comment the user pressed reply on
        max_depth: Number of visible nesting levels, root level included

    Returns:
        Parent ID for the new reply, or None when it must be top-level

    Raises:
        NotFoundError: If the clicked comment is not in the thread
        ValueError: If max_depth is less than 1
    """
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")

    path = ancestry(roots, clicked_id)
    if path is None:
        raise NotFoundError("Comment", str(clicked_id))

    depth = len(path) - 1
    if depth < max_depth - 1:
        return clicked_id
    if max_depth == 1:
        return None
    return path[max_depth - 2]
