"""Unit tests for Post entity behavior."""

from uuid import uuid4

from domain.entities.post import Comment, Like, Post


def _post() -> Post:
    return Post(user_id=uuid4(), text="hello")


class TestLikes:
    def test_like_is_a_set_over_user(self):
        post = _post()
        user = uuid4()

        assert post.add_like(user)
        assert not post.add_like(user)
        assert post.likes == [Like(user_id=user)]

    def test_string_and_uuid_ids_are_the_same_user(self):
        post = _post()
        user = uuid4()
        post.add_like(user)

        assert post.is_liked_by(str(user))
        assert post.remove_like(str(user))
        assert post.likes == []

    def test_remove_absent_like(self):
        post = _post()

        assert not post.remove_like(uuid4())


class TestComments:
    def test_prepend_and_remove_by_id(self):
        post = _post()
        c1 = Comment(user_id=uuid4(), text="one")
        c2 = Comment(user_id=uuid4(), text="two")

        post.add_comment(c1)
        post.add_comment(c2)
        assert post.comments == [c2, c1]

        assert post.remove_comment(c1.id)
        assert post.comments == [c2]

    def test_find_comment(self):
        post = _post()
        comment = Comment(user_id=uuid4(), text="one")
        post.add_comment(comment)

        assert post.find_comment(str(comment.id)) is comment
        assert post.find_comment(uuid4()) is None

    def test_remove_missing_comment(self):
        post = _post()
        post.add_comment(Comment(user_id=uuid4(), text="one"))

        assert not post.remove_comment(uuid4())
        assert len(post.comments) == 1
