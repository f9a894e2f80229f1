# mrgcar/routes/api_news.py
from __future__ import annotations

from flask import Blueprint, g
from sqlalchemy.exc import IntegrityError

from mrgcar import responses
from mrgcar.db import SessionLocal
from mrgcar.models import News
from mrgcar.validation import validate
from mrgcar.validation.news import CreateNews

from ._common import iso

bp = Blueprint("news", __name__)


def _news_to_dict(n: News) -> dict:
    return {
        "id": str(n.id),
        "title": n.title,
        "description": n.description,
        "content": n.content,
        "category": n.category,
        "author": n.author,
        "image": n.image,
        "isPopular": n.is_popular,
        "tags": n.tags or [],
        "createdAt": iso(n.created_at),
        "updatedAt": iso(n.updated_at),
    }


@bp.get("")
def list_news():
    with SessionLocal() as s:
        rows = s.query(News).order_by(News.created_at.desc(), News.title.asc()).all()
        return responses.success([_news_to_dict(n) for n in rows])


@bp.post("")
@validate(CreateNews)
def create_news():
    body: CreateNews = g.validated_body

    with SessionLocal() as s:
        article = News(
            title=body.title,
            description=body.description,
            content=body.content,
            category=body.category,
            author=body.author,
            image=body.image,
            tags=body.tags,
            is_popular=body.is_popular,
        )
        s.add(article)
        try:
            s.commit()
        except IntegrityError:
            s.rollback()
            return responses.conflict("A news article with this title already exists")
        s.refresh(article)
        return responses.success(_news_to_dict(article), 201)
