"""Shared test fixtures for authority tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from sqlalchemy import Boolean, ForeignKey, Integer, String, create_engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
    sessionmaker,
)

from authority import Authority

# ---------------------------------------------------------------------------
# Test models (resources)
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(50), default="viewer")

    posts: Mapped[list[Post]] = relationship("Post", back_populates="author")


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    is_published: Mapped[bool] = mapped_column(Boolean, default=False)
    is_locked: Mapped[bool] = mapped_column(Boolean, default=False)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"))

    author: Mapped[User] = relationship("User", back_populates="posts")


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    body: Mapped[str] = mapped_column(String(500))
    post_id: Mapped[int] = mapped_column(ForeignKey("posts.id"))
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"))


# ---------------------------------------------------------------------------
# MockUser - satisfies UserLike protocol
# ---------------------------------------------------------------------------


@dataclass
class MockUser:
    """Test user that satisfies UserLike protocol."""

    id: int | str
    role: str = "viewer"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def engine():
    """Create an in-memory SQLite engine with all tables."""
    eng = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture()
def session(engine):
    """Provide a transactional session that rolls back after each test."""
    factory = sessionmaker(bind=engine)
    sess = factory()
    try:
        yield sess
    finally:
        sess.rollback()
        sess.close()


@pytest.fixture()
def sample_data(session: Session) -> dict[str, list]:
    """Seed the database with users, posts and comments."""
    alice = User(id=1, name="Alice", role="admin")
    bob = User(id=2, name="Bob", role="editor")
    charlie = User(id=3, name="Charlie", role="viewer")
    session.add_all([alice, bob, charlie])

    post1 = Post(id=1, title="Public Post", is_published=True, author_id=1)
    post2 = Post(id=2, title="Draft Post", is_published=False, author_id=1)
    post3 = Post(id=3, title="Locked Post", is_published=True, is_locked=True, author_id=2)
    session.add_all([post1, post2, post3])

    comment = Comment(id=1, body="Nice", post_id=1, author_id=3)
    session.add(comment)

    session.flush()
    return {
        "users": [alice, bob, charlie],
        "posts": [post1, post2, post3],
        "comments": [comment],
    }


@pytest.fixture()
def user() -> MockUser:
    return MockUser(id=1, role="editor")


@pytest.fixture()
def authority(user: MockUser) -> Authority:
    """An empty Authority for an editor."""
    return Authority(user)
