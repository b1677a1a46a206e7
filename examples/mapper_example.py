"""Example mapping SQLAlchemy models into a JSON:API document.

Run with:
    python examples/mapper_example.py
"""
from __future__ import annotations

import json
import logging

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_mapper import Mapper

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.id"))
    article = relationship("Article", back_populates="comments")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    author = User(id=1, name="Ann", email="ann@example.com")
    articles = [
        Article(id=10, title="First", body="...", author_id=1, author=author),
        Article(id=11, title="Second", body="...", author_id=1, author=author),
    ]
    articles[0].comments = [Comment(id=100, body="Nice", article_id=10)]

    mapper = Mapper("https://api.example.com")
    document = mapper.map(
        articles,
        "articles",
        {"pagination": {"limit": 2, "offset": 0, "total": 2}},
    )
    print(json.dumps(document, indent=2))


if __name__ == "__main__":
    main()
