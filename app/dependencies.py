from fastapi import Depends

from app.repos.posts_repo import StaticPostsRepo
from app.services.posts_service import PostsService


def get_posts_repo():
    return StaticPostsRepo()


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
