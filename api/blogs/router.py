"""
Blog API endpoints, including the blog-scoped post routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core.db import require_object_id
from core.pagination import PageQuery, page_query
from core.schemas import Paginated
from posts.dependencies import get_post_service
from posts.schemas import BlogPostInput, PostOutput
from posts.service import PostService

from .dependencies import get_blog_service
from .schemas import BlogInput, BlogOutput
from .service import BlogService

router = APIRouter(prefix="/blogs")

BLOG_NOT_FOUND = "Blog not found."


@router.get("")
async def list_blogs(
    query: PageQuery = Depends(page_query),
    search_name_term: str | None = Query(default=None, alias="searchNameTerm"),
    service: BlogService = Depends(get_blog_service),
) -> Paginated[BlogOutput]:
    return await service.list_blogs(query, search_name_term=search_name_term)


@router.get("/{blog_id}")
async def get_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service),
) -> BlogOutput:
    return await service.get_blog(require_object_id(blog_id, detail=BLOG_NOT_FOUND))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_blog(
    payload: BlogInput,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: BlogService = Depends(get_blog_service),
) -> BlogOutput:
    return await service.create_blog(payload)


@router.put("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_blog(
    blog_id: str,
    payload: BlogInput,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: BlogService = Depends(get_blog_service),
) -> None:
    await service.update_blog(require_object_id(blog_id, detail=BLOG_NOT_FOUND), payload)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: BlogService = Depends(get_blog_service),
) -> None:
    await service.delete_blog(require_object_id(blog_id, detail=BLOG_NOT_FOUND))


@router.get("/{blog_id}/posts")
async def list_blog_posts(
    blog_id: str,
    query: PageQuery = Depends(page_query),
    service: PostService = Depends(get_post_service),
) -> Paginated[PostOutput]:
    return await service.list_blog_posts(require_object_id(blog_id, detail=BLOG_NOT_FOUND), query)


@router.post("/{blog_id}/posts", status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    blog_id: str,
    payload: BlogPostInput,
    _: str = Depends(auth_dependencies.require_basic_auth),
    service: PostService = Depends(get_post_service),
) -> PostOutput:
    return await service.create_blog_post(require_object_id(blog_id, detail=BLOG_NOT_FOUND), payload)
