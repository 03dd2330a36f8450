"""
HTTP routes for the blog API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from blog_backend.config import get_settings
from blog_backend.db import DbClient
from blog_backend.dependencies import (
    get_db_client,
    get_document_source,
    get_media_resolver,
)
from blog_backend.schemas import (
    BlogPost,
    CreateBlogPostRequest,
    CreateBlogPostResponse,
    HealthResponse,
    LastEvaluatedKey,
    ListBlogPostsResponse,
)
from doc_import import import_pipeline
from doc_import.fetch_utils import DocumentSource
from doc_import.media_resolver import MediaResolver
from shared.errors import MalformedDocument, SourceFetchError
from shared.types import BlogPostRecord

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_TITLE = "Untitled"


def _to_blog_post(record: BlogPostRecord) -> BlogPost:
    return BlogPost(**record.as_dict())


@router.post("/blog", response_model=CreateBlogPostResponse, status_code=201)
def create_blog_post(
    payload: CreateBlogPostRequest,
    db: DbClient = Depends(get_db_client),
    document_source: DocumentSource = Depends(get_document_source),
    media_resolver: MediaResolver = Depends(get_media_resolver),
):
    """
    Import a Google Doc, convert it to HTML and store it as a blog post.
    """
    settings = get_settings()
    try:
        result = import_pipeline.import_google_doc(
            payload.docId,
            document_source,
            media_resolver,
            max_workers=settings.media_workers,
        )
        record = BlogPostRecord(
            post_id=result.generated_post_id,
            created_at=result.created_at,
            title=payload.title or result.title or DEFAULT_TITLE,
            author=payload.author,
            content=result.html,
            images=result.media_urls,
        )
        db.save_post(record)
    except MalformedDocument as e:
        logger.warning("Document %s is malformed: %s", payload.docId, e)
        raise HTTPException(status_code=400, detail=f"Malformed document: {e}")
    except SourceFetchError as e:
        logger.warning("Could not fetch document %s: %s", payload.docId, e)
        raise HTTPException(status_code=502, detail="Failed to fetch document")
    except Exception:
        logger.exception("Error creating blog post from document %s", payload.docId)
        raise HTTPException(status_code=500, detail="Failed to create blog post")

    logger.info("Saved blog post %s from document %s", record.post_id, payload.docId)
    return CreateBlogPostResponse(
        message="Blog post created successfully", postId=record.post_id
    )


@router.get("/blog/{post_id}", response_model=BlogPost)
def get_blog_post(post_id: str, db: DbClient = Depends(get_db_client)):
    record = db.get_post(post_id)
    if not record:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return _to_blog_post(record)


@router.get("/blogs", response_model=ListBlogPostsResponse)
def list_blog_posts(
    page: int = Query(0, ge=0),
    db: DbClient = Depends(get_db_client),
):
    page_size = get_settings().blog_page_size
    offset = page * page_size
    records = db.list_posts(offset=offset, limit=page_size)
    total = db.count_posts()

    last_key = None
    if records and offset + len(records) < total:
        last_key = LastEvaluatedKey(postId=records[-1].post_id)
    return ListBlogPostsResponse(
        data=[_to_blog_post(record) for record in records],
        lastEvaluatedKey=last_key,
        totalCount=total,
        pageNumber=page,
    )


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
