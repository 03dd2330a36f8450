"""
Blog post store backed by SQLAlchemy, plus an in-memory test implementation.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from sqlalchemy import JSON, Column, String, Text, create_engine, func, select
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from shared.types import BlogPostRecord


class DbClient(Protocol):
    """Interface for blog post persistence."""

    def save_post(self, record: BlogPostRecord) -> None:
        ...

    def get_post(self, post_id: str) -> Optional[BlogPostRecord]:
        ...

    def list_posts(self, offset: int = 0, limit: int = 5) -> list[BlogPostRecord]:
        ...

    def count_posts(self) -> int:
        ...


class InMemoryDbClient:
    """Simple in-memory database for development and tests."""

    def __init__(self):
        self.posts: Dict[str, BlogPostRecord] = {}

    def save_post(self, record: BlogPostRecord) -> None:
        self.posts[record.post_id] = record

    def get_post(self, post_id: str) -> Optional[BlogPostRecord]:
        return self.posts.get(post_id)

    def list_posts(self, offset: int = 0, limit: int = 5) -> list[BlogPostRecord]:
        # Newest first; ties keep insertion order.
        ordered = sorted(
            self.posts.values(), key=lambda record: record.created_at, reverse=True
        )
        return ordered[offset : offset + limit]

    def count_posts(self) -> int:
        return len(self.posts)

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.posts.clear()


class SqlDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlDbClient")
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def _to_record(self, row: "BlogPostRow") -> BlogPostRecord:
        return BlogPostRecord(
            post_id=row.post_id,
            created_at=row.created_at,
            title=row.title,
            author=row.author,
            content=row.content,
            images=list(row.images or []),
        )

    def save_post(self, record: BlogPostRecord) -> None:
        with self.Session() as session:
            row = session.get(BlogPostRow, record.post_id)
            if row:
                row.created_at = record.created_at
                row.title = record.title
                row.author = record.author
                row.content = record.content
                row.images = list(record.images)
            else:
                session.add(
                    BlogPostRow(
                        post_id=record.post_id,
                        created_at=record.created_at,
                        title=record.title,
                        author=record.author,
                        content=record.content,
                        images=list(record.images),
                    )
                )
            session.commit()

    def get_post(self, post_id: str) -> Optional[BlogPostRecord]:
        with self.Session() as session:
            row = session.get(BlogPostRow, post_id)
            if not row:
                return None
            return self._to_record(row)

    def list_posts(self, offset: int = 0, limit: int = 5) -> list[BlogPostRecord]:
        with self.Session() as session:
            stmt = (
                select(BlogPostRow)
                .order_by(BlogPostRow.created_at.desc(), BlogPostRow.post_id.desc())
                .offset(offset)
                .limit(limit)
            )
            return [self._to_record(row) for row in session.execute(stmt).scalars()]

    def count_posts(self) -> int:
        with self.Session() as session:
            return session.execute(select(func.count()).select_from(BlogPostRow)).scalar_one()


Base = declarative_base()


class BlogPostRow(Base):
    __tablename__ = "blog_posts"

    post_id = Column(String, primary_key=True)
    # ISO-8601 UTC timestamps sort lexicographically.
    created_at = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    author = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    images = Column(JSON, nullable=False, default=list)
