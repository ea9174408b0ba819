"""SQLAlchemy table definitions for the blog.

Foreign keys carry no ON DELETE rules: repositories remove associations
themselves before removing a post or tag.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("title", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)

Index("idx_posts_created_at", posts_table.c.created_at)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(255), nullable=False, unique=True),
)

# ============================================================================
# POST_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", Uuid, ForeignKey("posts.id"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.id"), primary_key=True),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)
