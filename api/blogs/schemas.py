"""
Blog API schemas (request/response models).
"""

from __future__ import annotations

from core.schemas import CamelModel, trimmed

WEBSITE_URL_PATTERN = r"^https://([a-zA-Z0-9_-]+\.)+[a-zA-Z0-9_-]+(/[a-zA-Z0-9_-]+)*/?$"

BlogName = trimmed(max_length=15)
BlogDescription = trimmed(max_length=500)
WebsiteUrl = trimmed(max_length=100, pattern=WEBSITE_URL_PATTERN)


class BlogInput(CamelModel):
    name: BlogName
    description: BlogDescription
    website_url: WebsiteUrl


class BlogOutput(CamelModel):
    id: str
    name: str
    description: str
    website_url: str
    created_at: str
    is_membership: bool
