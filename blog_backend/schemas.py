"""
Pydantic schemas for the blog API.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class CreateBlogPostRequest(BaseModel):
    title: Optional[str] = Field(default=None, max_length=256)
    author: str = Field(..., min_length=1, max_length=128)
    docId: str = Field(..., min_length=1, max_length=128)


class CreateBlogPostResponse(BaseModel):
    message: str
    postId: str


class BlogPost(BaseModel):
    postId: str
    createdAt: str
    title: str
    author: str
    content: str
    images: list[str]


class LastEvaluatedKey(BaseModel):
    postId: str


class ListBlogPostsResponse(BaseModel):
    data: list[BlogPost]
    lastEvaluatedKey: LastEvaluatedKey | None = None
    totalCount: int
    pageNumber: int


class HealthResponse(BaseModel):
    status: Literal["ok"]
