# =============================================================================
# File: mrgcar/seeds/forum_counts.py
# Purpose: Reset forum_categories.post_count / member_count from the real
#          forum_posts rows (posts per category, distinct authors per category).
# Usage:   python -m mrgcar.seeds.forum_counts
# =============================================================================
from __future__ import annotations

from sqlalchemy import distinct, func, select, update

from mrgcar.db import SessionLocal
from mrgcar.models import ForumCategory, ForumPost

from .base import run_script


def recalculate_forum_counts() -> list[ForumCategory]:
    """Recompute the counters, then return categories by post_count desc."""
    print("🔄 Recalculating forum category counters...\n")

    post_count = (
        select(func.count(ForumPost.id))
        .where(ForumPost.category_id == ForumCategory.id)
        .scalar_subquery()
    )
    member_count = (
        select(func.count(distinct(ForumPost.user_name)))
        .where(ForumPost.category_id == ForumCategory.id)
        .scalar_subquery()
    )

    with SessionLocal() as s:
        s.execute(
            update(ForumCategory)
            .values(post_count=post_count, member_count=member_count, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        s.commit()
        print("✅ Category counters updated!\n")

        rows = (
            s.query(ForumCategory)
            .order_by(ForumCategory.post_count.desc(), ForumCategory.name.asc())
            .all()
        )

    print("📊 Current categories:")
    print("─" * 60)
    for row in rows:
        print(f"  {row.name}: {row.post_count} posts, {row.member_count} members")
    print("─" * 60)
    return rows


def main() -> None:
    run_script(recalculate_forum_counts, "Forum counter recalculation")


if __name__ == "__main__":
    main()
