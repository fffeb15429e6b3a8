from datetime import datetime, timezone

from app.schemas.post import MarkdownContent, Post

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def make_post(*contents, **overrides) -> Post:
    """
    Small valid post around the given blocks; keyword args replace fields.
    """
    fields = {
        "id": "post-1",
        "title": "Hello",
        "username": "ada",
        "contents": list(contents) or [MarkdownContent(content="# Hi")],
        "createdAt": datetime(2023, 1, 1, tzinfo=timezone.utc),
        "updatedAt": FIXED_NOW,
    }
    fields.update(overrides)
    return Post(**fields)


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    Records every id it is asked for.
    """

    def __init__(self, post=None):
        self.post = post
        self.calls = []

    def get_post(self, post_id: str):
        self.calls.append(post_id)
        return self.post


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, post=None, error: Exception | None = None):
        self._post = post
        self._error = error
        self.calls = []

    def get_post_contents(self, post_id: str, page: int = 1):
        self.calls.append((post_id, page))
        if self._error is not None:
            raise self._error
        return self._post
