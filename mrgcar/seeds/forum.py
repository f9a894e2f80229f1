# =============================================================================
# File: mrgcar/seeds/forum.py
# Purpose: Load data/forum.yml: upsert categories on id, posts on
#          (category_id, title) so a re-run never duplicates posts.
# Usage:   python -m mrgcar.seeds.forum   (after migrations)
# =============================================================================
from __future__ import annotations

import logging

import yaml
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from mrgcar.db import SessionLocal
from mrgcar.models import ForumCategory, ForumPost

from .base import DATA_DIR, SeedReport, print_report, run_script

log = logging.getLogger(__name__)

FORUM_FILE = DATA_DIR / "forum.yml"

CATEGORY_FIELDS = ("name", "description", "icon", "color", "type", "post_count", "member_count")
POST_FIELDS = (
    "user_name", "description", "content", "category", "car_brand", "car_model",
    "likes", "replies", "view_count", "is_pinned",
)


def load_forum_data() -> tuple[list[dict], list[dict]]:
    with FORUM_FILE.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    categories = raw.get("categories") or []
    posts = raw.get("posts") or []
    if not isinstance(categories, list) or not isinstance(posts, list):
        raise ValueError(f"{FORUM_FILE.name}: 'categories' and 'posts' must be lists")
    return categories, posts


def _upsert_category(s, cat: dict) -> bool:
    row = s.get(ForumCategory, cat["id"])
    values = {k: cat[k] for k in CATEGORY_FIELDS if k in cat}
    if row is None:
        s.add(ForumCategory(id=cat["id"], **values))
        s.flush()
        return True
    for k, v in values.items():
        setattr(row, k, v)
    row.updated_at = func.now()
    return False


def _upsert_post(s, post: dict) -> bool:
    row = (
        s.query(ForumPost)
        .filter_by(category_id=post["category_id"], title=post["title"])
        .first()
    )
    values = {k: post[k] for k in POST_FIELDS if k in post}
    if row is None:
        s.add(ForumPost(category_id=post["category_id"], title=post["title"], **values))
        s.flush()
        return True
    for k, v in values.items():
        setattr(row, k, v)
    row.updated_at = func.now()
    return False


def _seed_rows(s, rows: list[dict], upsert, label: str) -> SeedReport:
    report = SeedReport()
    for row in rows:
        if not isinstance(row, dict):
            log.warning("Skipping malformed %s record: %r", label, row)
            report.errors += 1
            continue

        try:
            inserted = upsert(s, row)
            s.commit()
        except (SQLAlchemyError, KeyError, TypeError) as exc:
            s.rollback()
            log.error("Error seeding %s %r: %s", label, row.get("id") or row.get("title"), exc)
            report.errors += 1
            continue
        if inserted:
            report.inserted += 1
        else:
            report.updated += 1
    return report


def seed_forum(
    categories: list[dict] | None = None, posts: list[dict] | None = None
) -> tuple[SeedReport, SeedReport]:
    print("🌱 Seeding forum data...")
    if categories is None or posts is None:
        loaded_categories, loaded_posts = load_forum_data()
        categories = loaded_categories if categories is None else categories
        posts = loaded_posts if posts is None else posts

    with SessionLocal() as s:
        cat_report = _seed_rows(s, categories, _upsert_category, "category")
        print(f"✅ Seeded {cat_report.inserted + cat_report.updated} forum categories")
        print_report(cat_report)

        post_report = _seed_rows(s, posts, _upsert_post, "post")
        print(f"✅ Seeded {post_report.inserted + post_report.updated} forum posts")
        print_report(post_report)

    print("✅ Forum seeding complete!")
    return cat_report, post_report


def main() -> None:
    run_script(seed_forum, "Forum seed")


if __name__ == "__main__":
    main()
