"""Comment thread reconstruction.

Comments are stored flat with a parent reference. ``build_comment_tree`` turns
such a list into a reply tree:

1. Index comments by id. A repeated id keeps its first position and the last
   comment seen with that id.
2. Attach each comment to its parent. Comments whose parent is not in the
   list are orphans and are dropped, never promoted to the top level.
3. Sort top-level comments by creation time, newest or oldest first.
4. Sort replies at every depth oldest first, whatever the top-level order.

The builder never raises on bad parent references. A comment that is its own
ancestor is unreachable from any top-level comment and is dropped with its
replies. Ties on ``created_at`` keep input order.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from board.domain.model.comment import Comment
from board.domain.value import CommentId, CommentSortOrder


@dataclass
class CommentNode:
    """Comment with its replies attached."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)

    def walk(self) -> Iterable["CommentNode"]:
        """Yield this node and its descendants depth-first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.replies))


def _created_at(node: CommentNode):
    return node.comment.created_at


def build_comment_tree(
    comments: Iterable[Comment],
    order: CommentSortOrder = CommentSortOrder.NEWEST,
) -> list[CommentNode]:
    """Build the reply tree for a flat list of comments.

    Args:
        comments: Comments of one subject, in any order
        order: Ordering of top-level comments

    Returns:
        Top-level comment nodes with replies nested recursively
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        existing = nodes.get(comment.id)
        if existing is not None:
            existing.comment = comment
        else:
            nodes[comment.id] = CommentNode(comment=comment)

    roots: list[CommentNode] = []
    for node in nodes.values():
        parent_id = node.comment.parent_comment_id
        if parent_id is None:
            roots.append(node)
        elif parent_id in nodes:
            nodes[parent_id].replies.append(node)

    # Every node is visited once here, so cycles cannot recurse forever
    for node in nodes.values():
        node.replies.sort(key=_created_at)

    roots.sort(key=_created_at, reverse=order == CommentSortOrder.NEWEST)
    return roots
