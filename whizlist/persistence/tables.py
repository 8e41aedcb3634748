"""SQLAlchemy table definitions for Whizlist.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one row per auth user)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("full_name", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# FOLDERS TABLE
# ============================================================================
folders_table = Table(
    "folders",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column(
        "parent_id", UUID, ForeignKey("folders.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "owner_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_folders_owner_id", folders_table.c.owner_id)

# ============================================================================
# LISTS TABLE
# ============================================================================
lists_table = Table(
    "lists",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column(
        "folder_id", UUID, ForeignKey("folders.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "owner_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_lists_owner_id", lists_table.c.owner_id)
Index("idx_lists_folder_id", lists_table.c.folder_id)

# ============================================================================
# PRODUCTS TABLE
# ============================================================================
products_table = Table(
    "products",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(500), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("price", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    Column("product_url", Text, nullable=False),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "list_id", UUID, ForeignKey("lists.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "owner_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_products_owner_id", products_table.c.owner_id)
Index("idx_products_list_id", products_table.c.list_id)

# ============================================================================
# LIST_PRODUCTS TABLE (list memberships)
# ============================================================================
list_products_table = Table(
    "list_products",
    metadata,
    Column(
        "list_id", UUID, ForeignKey("lists.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "product_id",
        UUID,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "added_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("list_id", "product_id", name="pk_list_products"),
)

Index("idx_list_products_product_id", list_products_table.c.product_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("content", Text, nullable=False),
    Column("entity_type", String(20), nullable=False),
    Column("entity_id", Text, nullable=False),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "product_id",
        UUID,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "entity_type IN ('product', 'folder', 'list')",
        name="check_comment_entity_type",
    ),
    CheckConstraint("length(content) > 0", name="check_comment_content"),
)

Index(
    "idx_comments_entity",
    comments_table.c.entity_type,
    comments_table.c.entity_id,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# COMMENT_LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_like"),
)

Index("idx_comment_likes_comment_id", comment_likes_table.c.comment_id)
