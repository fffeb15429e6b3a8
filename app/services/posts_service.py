import logging

from app.errors import NotFoundError
from app.schemas.post import Post

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def get_post_contents(self, post_id: str, page: int = 1) -> Post:
        # page is accepted for API compatibility; the post is returned whole
        logger.debug(f"Loading contents for post {post_id} (page {page})")
        post = self.repo.get_post(post_id)
        if post is None:
            logger.warning(f"Post {post_id} not found")
            raise NotFoundError(post_id)
        return post
