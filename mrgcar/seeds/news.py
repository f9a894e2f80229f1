# =============================================================================
# File: mrgcar/seeds/news.py
# Purpose: Load data/news.yml into the news table, upserted on title.
# Usage:   python -m mrgcar.seeds.news
# =============================================================================
from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from mrgcar.db import SessionLocal
from mrgcar.models import News

from .base import SeedReport, load_dataset, print_report, run_script

log = logging.getLogger(__name__)

NEWS_FILE = "news.yml"
ARTICLE_FIELDS = ("description", "content", "image", "category", "author", "tags", "is_popular")


def seed_news(articles: list[dict] | None = None) -> SeedReport:
    print("🌱 Seeding news data...")
    if articles is None:
        articles = load_dataset(NEWS_FILE, "articles")

    report = SeedReport()
    with SessionLocal() as s:
        for article in articles:
            if not isinstance(article, dict):
                log.warning("Skipping malformed news record: %r", article)
                report.errors += 1
                continue

            title = article.get("title")
            values = {k: article[k] for k in ARTICLE_FIELDS if k in article}
            try:
                row = s.query(News).filter_by(title=title).first()
                if row is None:
                    s.add(News(title=title, **values))
                    s.flush()
                else:
                    for k, v in values.items():
                        setattr(row, k, v)
                    row.updated_at = func.now()
                s.commit()
            except SQLAlchemyError as exc:
                s.rollback()
                log.error("Error with article %r: %s", title, exc)
                report.errors += 1
                continue

            if row is None:
                report.inserted += 1
            else:
                report.updated += 1

    print(f"✅ Seeded {report.inserted + report.updated} news articles")
    print_report(report)
    return report


def main() -> None:
    run_script(seed_news, "News seed")


if __name__ == "__main__":
    main()
