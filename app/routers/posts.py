import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from app import dependencies as deps
from app.errors import PostsError
from app.schemas.post import Post
from app.serializer import serialize
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/post", tags=["post"])


@router.get(
    "/{postId}/contents",
    response_class=Response,
    responses={200: {"model": Post, "description": "The post and its content blocks"}},
)
def get_post_contents(
    postId: str,
    page: int = Query(1, ge=1, description="Accepted but currently unused"),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a post with its ordered content blocks."""
    logger.debug(f"GET contents for post {postId}, page {page}")
    try:
        post = service.get_post_contents(postId, page)
        return Response(content=serialize(post), media_type="application/json")
    except (HTTPException, PostsError):
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {postId}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
