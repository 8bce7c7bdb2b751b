"""SQLAlchemy ORM models for the demo blog."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func

from inplace_editing.infrastructure.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    posts = relationship("Post", back_populates="category")

    @validates("name")
    def validate_name(self, key, value):
        if value is None or not str(value).strip():
            raise ValueError("can't be blank")
        return value


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(150), nullable=False)
    body = Column(Text)
    view_limit = Column(Integer)
    category_id = Column(Integer, ForeignKey("categories.id"), index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    category = relationship("Category", back_populates="posts")

    @validates("title")
    def validate_title(self, key, value):
        if value is None or not value.strip():
            raise ValueError("can't be blank")
        if len(value) > 150:
            raise ValueError("is too long (maximum is 150 characters)")
        return value

    @validates("category_id")
    def validate_category_id(self, key, value):
        if value is None:
            raise ValueError("can't be blank")
        return value
