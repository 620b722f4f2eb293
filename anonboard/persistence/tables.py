"""SQLAlchemy table definitions for anonboard.

These table definitions are used by the Core-based repositories.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,

    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the account service, read for display names)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("anonymous_username", String(100), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_anonymous_username", users_table.c.anonymous_username)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content", Text, nullable=False),
    Column("author_id", UUID, nullable=False),  # No FK: users may be purged
    Column(
        "category",
        postgresql.ENUM(
            "politics",
            "government",
            "education",
            "social",
            "general",
            name="post_category",
            create_type=False,
        ),
        nullable=False,
        server_default="general",
    ),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("repost_count", Integer, nullable=False, server_default="0"),
    Column("is_repost", Boolean, nullable=False, server_default="false"),
    Column("original_post_id", UUID, ForeignKey("posts.id"), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(content) BETWEEN 1 AND 5000", name="content_length"),
    CheckConstraint(
        "likes >= 0 AND dislikes >= 0 AND comment_count >= 0 AND repost_count >= 0",
        name="counters_non_negative",
    ),
    CheckConstraint(
        "is_repost = (original_post_id IS NOT NULL)",
        name="repost_has_original",
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_category", posts_table.c.category)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(content) BETWEEN 1 AND 1000", name="content_length"),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# REACTIONS TABLE
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "type",
        postgresql.ENUM("like", "dislike", name="reaction_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name="uq_reaction_user_post"),
)

Index("idx_reactions_post_id", reactions_table.c.post_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("reporter_id", UUID, nullable=False),
    Column("post_id", UUID, nullable=True),  # Audit trail, no FK
    Column("comment_id", UUID, nullable=True),
    Column(
        "reason",
        postgresql.ENUM(
            "spam",
            "harassment",
            "hate_speech",
            "violence",
            "misinformation",
            "other",
            name="report_reason",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("description", String(1000), nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "post_id IS NOT NULL OR comment_id IS NOT NULL", name="report_has_target"
    ),
)

Index("idx_reports_created_at", reports_table.c.created_at.desc())
