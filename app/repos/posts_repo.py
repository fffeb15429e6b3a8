from typing import Optional

from app.sample_post import build_sample_post
from app.schemas.post import Post


class StaticPostsRepo:
    """Serves the sample post for every id until a real store exists."""

    def get_post(self, post_id: str) -> Optional[Post]:
        return build_sample_post()
