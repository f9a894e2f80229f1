# mrgcar/routes/api_forum.py
from __future__ import annotations

from flask import Blueprint, g
from sqlalchemy.exc import IntegrityError

from mrgcar import responses
from mrgcar.db import SessionLocal
from mrgcar.models import ForumCategory, ForumPost
from mrgcar.validation import validate
from mrgcar.validation.forum import CreateForumPost, ListForumPostsQuery

from ._common import iso, parse_uuid

bp = Blueprint("forum", __name__)


def _category_to_dict(c: ForumCategory) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "description": c.description,
        "icon": c.icon,
        "color": c.color,
        "type": c.type,
        "postCount": c.post_count,
        "memberCount": c.member_count,
    }


def _post_to_dict(p: ForumPost) -> dict:
    return {
        "id": str(p.id),
        "userName": p.user_name,
        "title": p.title,
        "description": p.description,
        "content": p.content,
        "category": p.category,
        "categoryId": p.category_id,
        "carBrand": p.car_brand,
        "carModel": p.car_model,
        "likes": p.likes,
        "replies": p.replies,
        "viewCount": p.view_count,
        "isPinned": p.is_pinned,
        "createdAt": iso(p.created_at),
    }


@bp.get("/categories")
def list_categories():
    with SessionLocal() as s:
        rows = (
            s.query(ForumCategory)
            .order_by(ForumCategory.post_count.desc(), ForumCategory.name.asc())
            .all()
        )
        return responses.success([_category_to_dict(c) for c in rows])


@bp.get("/posts")
@validate(ListForumPostsQuery, "query")
def list_posts():
    q: ListForumPostsQuery = g.validated_query

    with SessionLocal() as s:
        query = s.query(ForumPost)
        if q.category_id:
            query = query.filter(ForumPost.category_id == q.category_id)
        rows = (
            query.order_by(ForumPost.is_pinned.desc(), ForumPost.created_at.desc())
            .limit(q.limit)
            .offset(q.offset)
            .all()
        )
        return responses.success([_post_to_dict(p) for p in rows])


@bp.get("/posts/<post_id>")
def get_post(post_id: str):
    pid = parse_uuid(post_id)
    with SessionLocal() as s:
        post = s.get(ForumPost, pid) if pid else None
        if post is None:
            return responses.not_found("Forum post")
        return responses.success(_post_to_dict(post))


@bp.post("/posts")
@validate(CreateForumPost)
def create_post():
    body: CreateForumPost = g.validated_body

    with SessionLocal() as s:
        if s.get(ForumCategory, body.category_id) is None:
            return responses.bad_request(f"Unknown forum category: {body.category_id}")

        post = ForumPost(
            title=body.title,
            description=body.description,
            content=body.content,
            category=body.category,
            category_id=body.category_id,
            user_name=body.user_name,
            car_brand=body.car_brand,
            car_model=body.car_model,
        )
        s.add(post)
        try:
            s.commit()
        except IntegrityError:
            s.rollback()
            return responses.conflict("A post with this title already exists in this category")
        s.refresh(post)
        return responses.success(_post_to_dict(post), 201)
