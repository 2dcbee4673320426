"""Unit tests for comment thread reconstruction."""

from uuid import uuid4

from board.domain.service.thread_builder import CommentNode, build_comment_tree
from board.domain.value import CommentId, CommentSortOrder, SubjectId
from tests.conftest import at, make_comment


def _ids(nodes: list[CommentNode]) -> list[CommentId]:
    return [node.comment.id for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def _example_thread(self):
        """Two roots, one reply and one orphan whose parent is absent."""
        subject_id = SubjectId(uuid4())
        first = make_comment(subject_id, created_at=at(10))
        reply = make_comment(subject_id, parent_comment_id=first.id, created_at=at(20))
        second = make_comment(subject_id, created_at=at(5))
        orphan = make_comment(
            subject_id, parent_comment_id=CommentId(uuid4()), created_at=at(30)
        )
        return first, reply, second, orphan

    def test_newest_first_with_orphan_dropped(self):
        # Arrange
        first, reply, second, orphan = self._example_thread()

        # Act
        roots = build_comment_tree(
            [first, reply, second, orphan], CommentSortOrder.NEWEST
        )

        # Assert
        assert _ids(roots) == [first.id, second.id]
        assert _ids(roots[0].replies) == [reply.id]
        assert roots[1].replies == []
        all_ids = [node.comment.id for root in roots for node in root.walk()]
        assert orphan.id not in all_ids

    def test_oldest_first_keeps_replies(self):
        # Arrange
        first, reply, second, orphan = self._example_thread()

        # Act
        roots = build_comment_tree(
            [first, reply, second, orphan], CommentSortOrder.OLDEST
        )

        # Assert
        assert _ids(roots) == [second.id, first.id]
        assert _ids(roots[1].replies) == [reply.id]

    def test_default_order_is_newest(self):
        first, reply, second, orphan = self._example_thread()

        roots = build_comment_tree([second, first])

        assert _ids(roots) == [first.id, second.id]

    def test_empty_input(self):
        assert build_comment_tree([], CommentSortOrder.NEWEST) == []

    def test_replies_ascending_at_every_depth(self):
        # Arrange
        root = make_comment(created_at=at(0))
        late = make_comment(root.subject_id, root.id, created_at=at(30))
        early = make_comment(root.subject_id, root.id, created_at=at(10))
        nested_late = make_comment(root.subject_id, early.id, created_at=at(50))
        nested_early = make_comment(root.subject_id, early.id, created_at=at(40))

        for order in CommentSortOrder:
            # Act
            roots = build_comment_tree(
                [nested_late, late, root, nested_early, early], order
            )

            # Assert
            assert _ids(roots) == [root.id]
            assert _ids(roots[0].replies) == [early.id, late.id]
            assert _ids(roots[0].replies[0].replies) == [
                nested_early.id,
                nested_late.id,
            ]

    def test_reply_to_orphan_is_dropped_with_it(self):
        # Arrange
        root = make_comment(created_at=at(0))
        orphan = make_comment(
            root.subject_id, CommentId(uuid4()), created_at=at(10)
        )
        orphan_reply = make_comment(root.subject_id, orphan.id, created_at=at(20))

        # Act
        roots = build_comment_tree([root, orphan, orphan_reply])

        # Assert
        assert _ids(roots) == [root.id]
        assert list(roots[0].walk())[1:] == []

    def test_self_parent_is_dropped(self):
        # Arrange
        comment_id = CommentId(uuid4())
        looped = make_comment(parent_comment_id=comment_id, comment_id=comment_id)
        root = make_comment(looped.subject_id, created_at=at(1))

        # Act
        roots = build_comment_tree([looped, root])

        # Assert
        assert _ids(roots) == [root.id]
        assert roots[0].replies == []

    def test_cycle_is_dropped(self):
        # Arrange
        a_id, b_id = CommentId(uuid4()), CommentId(uuid4())
        a = make_comment(parent_comment_id=b_id, comment_id=a_id)
        b = make_comment(a.subject_id, parent_comment_id=a_id, comment_id=b_id)

        # Act
        roots = build_comment_tree([a, b])

        # Assert
        assert roots == []

    def test_duplicate_id_keeps_last_comment(self):
        # Arrange
        comment_id = CommentId(uuid4())
        older = make_comment(comment_id=comment_id, content="first version")
        newer = make_comment(
            older.subject_id, comment_id=comment_id, content="second version"
        )

        # Act
        roots = build_comment_tree([older, newer])

        # Assert
        assert len(roots) == 1
        assert roots[0].comment.content == "second version"

    def test_ties_keep_input_order(self):
        # Arrange
        first = make_comment(created_at=at(0))
        second = make_comment(first.subject_id, created_at=at(0))
        third = make_comment(first.subject_id, created_at=at(0))

        for order in CommentSortOrder:
            # Act
            roots = build_comment_tree([first, second, third], order)

            # Assert
            assert _ids(roots) == [first.id, second.id, third.id]

    def test_input_order_does_not_matter(self):
        first, reply, second, orphan = self._example_thread()

        forward = build_comment_tree([first, reply, second, orphan])
        backward = build_comment_tree([orphan, second, reply, first])

        assert _ids(forward) == _ids(backward)
        assert _ids(forward[0].replies) == _ids(backward[0].replies)


class TestCommentNode:
    """Tests for CommentNode.walk."""

    def test_walk_is_depth_first_in_reply_order(self):
        # Arrange
        root = make_comment(created_at=at(0))
        a = make_comment(root.subject_id, root.id, created_at=at(1))
        a_child = make_comment(root.subject_id, a.id, created_at=at(2))
        b = make_comment(root.subject_id, root.id, created_at=at(3))

        # Act
        (tree,) = build_comment_tree([b, a_child, a, root])

        # Assert
        assert [node.comment.id for node in tree.walk()] == [
            root.id,
            a.id,
            a_child.id,
            b.id,
        ]
