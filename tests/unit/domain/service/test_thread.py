"""Unit tests for thread construction and the reply depth rule."""

from uuid import uuid4

import pytest

from whizlist.domain.error import NotFoundError
from whizlist.domain.service.thread import (
    ancestry,
    build_thread,
    find_node,
    flatten,
    reply_parent,
    subtree_ids,
    walk,
)
from whizlist.domain.value import CommentId
from tests.conftest import annotate, make_comment


def _chain(length: int):
    """A -> B -> C -> ... each one reply to the previous."""
    comments = []
    parent = None
    for i in range(length):
        comment = make_comment(minutes=i, parent_id=parent)
        comments.append(comment)
        parent = comment.id
    return comments


class TestBuildThread:
    """Tests for build_thread."""

    def test_every_comment_appears_exactly_once(self):
        root = make_comment(minutes=0)
        reply = make_comment(minutes=1, parent_id=root.id)
        nested = make_comment(minutes=2, parent_id=reply.id)
        other_root = make_comment(minutes=3)

        roots = build_thread(
            [annotate(c) for c in (nested, other_root, reply, root)]
        )

        ids = [node.id for node in flatten(roots)]
        assert sorted(ids) == sorted([root.id, reply.id, nested.id, other_root.id])
        assert len(ids) == len(set(ids))

    def test_orphan_is_promoted_to_root(self):
        orphan = make_comment(minutes=5, parent_id=CommentId(uuid4()))
        root = make_comment(minutes=0)

        roots = build_thread([annotate(orphan), annotate(root)])

        assert [node.id for node in roots] == [root.id, orphan.id]
        assert roots[1].replies == []

    def test_roots_and_replies_are_chronological(self):
        root_late = make_comment(minutes=10)
        root_early = make_comment(minutes=1)
        reply_late = make_comment(minutes=8, parent_id=root_early.id)
        reply_early = make_comment(minutes=3, parent_id=root_early.id)

        roots = build_thread(
            [annotate(c) for c in (root_late, reply_late, root_early, reply_early)]
        )

        assert [node.id for node in roots] == [root_early.id, root_late.id]
        assert [r.id for r in roots[0].replies] == [reply_early.id, reply_late.id]

    def test_equal_timestamps_keep_load_order(self):
        first = make_comment(minutes=0)
        second = make_comment(minutes=0)

        roots = build_thread([annotate(first), annotate(second)])

        assert [node.id for node in roots] == [first.id, second.id]

    def test_like_annotations_are_carried_to_nodes(self):
        comment = make_comment()

        roots = build_thread([annotate(comment, like_count=4, liked=True)])

        assert roots[0].like_count == 4
        assert roots[0].is_liked_by_user is True

    def test_parent_cycle_does_not_lose_comments(self):
        a_id, b_id = CommentId(uuid4()), CommentId(uuid4())
        a = make_comment(minutes=0, parent_id=b_id, comment_id=a_id)
        b = make_comment(minutes=1, parent_id=a_id, comment_id=b_id)

        roots = build_thread([annotate(a), annotate(b)])

        assert {node.id for node in flatten(roots)} == {a_id, b_id}
        assert len(flatten(roots)) == 2

    def test_empty_input_gives_empty_thread(self):
        assert build_thread([]) == []


class TestTreeHelpers:
    """Tests for walk, find_node, subtree_ids and ancestry."""

    def test_walk_reports_depths_in_preorder(self):
        a, b, c = _chain(3)
        roots = build_thread([annotate(x) for x in (a, b, c)])

        assert [(node.id, depth) for node, depth in walk(roots)] == [
            (a.id, 0),
            (b.id, 1),
            (c.id, 2),
        ]

    def test_subtree_ids_include_all_descendants(self):
        a, b, c = _chain(3)
        sibling = make_comment(minutes=9, parent_id=a.id)
        roots = build_thread([annotate(x) for x in (a, b, c, sibling)])

        assert subtree_ids(roots, b.id) == {b.id, c.id}
        assert subtree_ids(roots, CommentId(uuid4())) == set()

    def test_ancestry_is_root_first(self):
        a, b, c = _chain(3)
        roots = build_thread([annotate(x) for x in (a, b, c)])

        assert ancestry(roots, c.id) == [a.id, b.id, c.id]
        assert find_node(roots, b.id).id == b.id


class TestReplyParent:
    """Tests for the reply nesting rule."""

    def test_reply_on_root_attaches_to_root(self):
        a, b, c, d = _chain(4)
        roots = build_thread([annotate(x) for x in (a, b, c, d)])

        assert reply_parent(roots, a.id) == a.id

    def test_reply_on_second_level_attaches_to_it(self):
        a, b, c, d = _chain(4)
        roots = build_thread([annotate(x) for x in (a, b, c, d)])

        assert reply_parent(roots, b.id) == b.id

    def test_reply_on_deepest_level_attaches_to_its_parent(self):
        a, b, c, d = _chain(4)
        roots = build_thread([annotate(x) for x in (a, b, c, d)])

        assert reply_parent(roots, c.id) == b.id

    def test_reply_below_deepest_level_is_clamped(self):
        a, b, c, d = _chain(4)
        roots = build_thread([annotate(x) for x in (a, b, c, d)])

        assert reply_parent(roots, d.id) == b.id

    def test_custom_max_depth(self):
        chain = _chain(6)
        roots = build_thread([annotate(x) for x in chain])

        assert reply_parent(roots, chain[3].id, max_depth=5) == chain[3].id
        assert reply_parent(roots, chain[5].id, max_depth=5) == chain[3].id

    def test_single_level_threads_only_have_roots(self):
        a, b = _chain(2)
        roots = build_thread([annotate(x) for x in (a, b)])

        assert reply_parent(roots, a.id, max_depth=1) is None
        assert reply_parent(roots, b.id, max_depth=1) is None

    def test_unknown_comment_raises(self):
        roots = build_thread([annotate(make_comment())])

        with pytest.raises(NotFoundError):
            reply_parent(roots, CommentId(uuid4()))

    def test_invalid_max_depth_raises(self):
        a = make_comment()
        roots = build_thread([annotate(a)])

        with pytest.raises(ValueError):
            reply_parent(roots, a.id, max_depth=0)
