from datetime import datetime
from unittest import mock

import pytest
from sqlalchemy import ForeignKey, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, relationship
from sqlalchemy.pool import StaticPool

from query_builder import FindAndCountResult


class BaseModel(DeclarativeBase):
    pass


class UserTable(BaseModel):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    email_address: Mapped[str] = mapped_column(String(255))
    age: Mapped[int]
    created_at: Mapped[datetime]

    posts: Mapped[list["PostTable"]] = relationship(back_populates="user")


class PostTable(BaseModel):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))

    user: Mapped[UserTable] = relationship(back_populates="posts")


USERS = [
    # name, email, age, created_at, number of posts
    ("Charlie", "charlie@example.com", 35, datetime(2024, 3, 1), 1),
    ("Alice", "alice@example.com", 30, datetime(2024, 1, 1), 3),
    ("Bob", "bob@example.com", 30, datetime(2024, 2, 1), 0),
    ("Dave", "dave@example.com", 25, datetime(2024, 4, 1), 2),
]


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    BaseModel.metadata.create_all(engine)
    with Session(engine) as session:
        for name, email, age, created_at, post_count in USERS:
            user = UserTable(name=name, email_address=email, age=age, created_at=created_at)
            user.posts = [PostTable(title=f"{name} post {i}") for i in range(post_count)]
            session.add(user)
        session.commit()
        yield session
    engine.dispose()


@pytest.fixture
def data_source():
    """Data source double, the find operations are AsyncMocks."""
    source = mock.Mock()
    source.find_all = mock.AsyncMock(return_value=[])
    source.find_one = mock.AsyncMock(return_value=None)
    source.find_and_count_all = mock.AsyncMock(return_value=FindAndCountResult(count=10, rows=[]))
    return source


@pytest.fixture
def user_table():
    return UserTable


@pytest.fixture
def post_table():
    return PostTable
