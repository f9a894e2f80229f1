"""unique (category_id, title) on forum_posts, unique title on news

Revision ID: 9b3e5d2a41c8
Revises: 4f2a9c1d7e60
Create Date: 2025-02-03 16:05:12.884310

"""
from alembic import op


# revision identifiers, used by Alembic.
revision = "9b3e5d2a41c8"
down_revision = "4f2a9c1d7e60"
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table("forum_posts") as batch_op:
        batch_op.create_unique_constraint(
            "forum_posts_category_title_unique", ["category_id", "title"]
        )
    with op.batch_alter_table("news") as batch_op:
        batch_op.create_unique_constraint("news_title_unique", ["title"])


def downgrade():
    with op.batch_alter_table("news") as batch_op:
        batch_op.drop_constraint("news_title_unique", type_="unique")
    with op.batch_alter_table("forum_posts") as batch_op:
        batch_op.drop_constraint("forum_posts_category_title_unique", type_="unique")
