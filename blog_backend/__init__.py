"""
Backend package for the blog API.

This package provides a FastAPI application that imports Google Docs as
blog posts, with storage and database abstractions that fall back to
in-memory implementations for development and tests.
"""
