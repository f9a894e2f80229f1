"""create cars, admin_users, forum and news tables

Revision ID: 4f2a9c1d7e60
Revises:
Create Date: 2025-01-12 10:24:31.512047

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = "4f2a9c1d7e60"
down_revision = None
branch_labels = None
depends_on = None

JSONDocument = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")
StringList = sa.JSON().with_variant(postgresql.ARRAY(sa.Text()), "postgresql")


def upgrade():
    op.create_table(
        "cars",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("variant", sa.String(200), nullable=False, server_default=""),
        sa.Column("body_type", sa.String(50), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("data", JSONDocument, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("make", "model", "variant", name="cars_make_model_variant_unique"),
        sa.CheckConstraint("status IN ('draft', 'published')", name="cars_status_check"),
    )
    op.create_index("ix_cars_make", "cars", ["make"])
    op.create_index("ix_cars_status", "cars", ["status"])

    op.create_table(
        "admin_users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="admin"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_admin_users_email", "admin_users", ["email"], unique=True)

    op.create_table(
        "forum_categories",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(50)),
        sa.Column("color", sa.String(20)),
        sa.Column("type", sa.String(50)),
        sa.Column("post_count", sa.Integer()),
        sa.Column("member_count", sa.Integer()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        "forum_posts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        sa.Column("user_name", sa.String(100), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("category_id", sa.String(50), sa.ForeignKey("forum_categories.id"), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("car_brand", sa.String(100), nullable=True),
        sa.Column("car_model", sa.String(100), nullable=True),
        sa.Column("likes", sa.Integer()),
        sa.Column("replies", sa.Integer()),
        sa.Column("view_count", sa.Integer()),
        sa.Column("is_pinned", sa.Boolean()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_forum_posts_category_id", "forum_posts", ["category_id"])
    op.create_index("ix_forum_posts_created_at", "forum_posts", ["created_at"])
    op.create_index("ix_forum_posts_is_pinned", "forum_posts", ["is_pinned"])

    op.create_table(
        "news",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("image", sa.String(500), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("author", sa.String(100), nullable=True),
        sa.Column("tags", StringList, nullable=True),
        sa.Column("is_popular", sa.Boolean()),
        sa.Column("view_count", sa.Integer()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_news_category", "news", ["category"])
    op.create_index("ix_news_created_at", "news", ["created_at"])
    op.create_index("ix_news_is_popular", "news", ["is_popular"])


def downgrade():
    op.drop_table("news")
    op.drop_table("forum_posts")
    op.drop_table("forum_categories")
    op.drop_table("admin_users")
    op.drop_table("cars")
