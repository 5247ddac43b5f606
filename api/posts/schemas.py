"""
Post API schemas (request/response models).
"""

from __future__ import annotations

from core.schemas import CamelModel, trimmed

PostTitle = trimmed(max_length=30)
PostShortDescription = trimmed(max_length=100)
PostContent = trimmed(max_length=1000)
BlogIdField = trimmed(max_length=100)


class BlogPostInput(CamelModel):
    """
    Post body for `/blogs/{blogId}/posts`, where the blog comes from the path.
    """

    title: PostTitle
    short_description: PostShortDescription
    content: PostContent


class PostInput(BlogPostInput):
    blog_id: BlogIdField


class PostOutput(CamelModel):
    id: str
    title: str
    short_description: str
    content: str
    blog_id: str
    blog_name: str
    created_at: str
