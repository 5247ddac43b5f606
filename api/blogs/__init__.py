"""Blogs: CRUD and the blog-scoped post routes."""
