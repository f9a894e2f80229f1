# mrgcar/routes/api_cars.py
from __future__ import annotations

from flask import Blueprint, g
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from mrgcar import responses
from mrgcar.db import SessionLocal
from mrgcar.models import Car
from mrgcar.validation import validate
from mrgcar.validation.cars import CreateCar, ListCarsQuery, UpdateCar

from ._common import iso, parse_uuid

bp = Blueprint("cars", __name__)

# request field -> column
_UPDATABLE = {
    "make": "make",
    "model": "model",
    "variant": "variant",
    "body_type": "body_type",
    "status": "status",
    "data": "data",
}


def _sanitize_series(values):
    # the mobile client crashes on nulls inside chart series
    return [0 if v is None else v for v in values]


def _car_to_dict(car: Car) -> dict:
    data = dict(car.data or {})
    for key in ("performanceData", "efficiencyData"):
        if isinstance(data.get(key), list):
            data[key] = _sanitize_series(data[key])

    return {
        "id": str(car.id),
        "make": car.make,
        "model": car.model,
        "variant": car.variant or "",
        "bodyType": car.body_type or "",
        "status": car.status,
        "data": data,
        "createdAt": iso(car.created_at),
        "updatedAt": iso(car.updated_at),
    }


# -----------------------------------------------------------------
# GET /v1/cars?status=published|draft|all&limit=50&offset=0
# -----------------------------------------------------------------
@bp.get("")
@validate(ListCarsQuery, "query")
def list_cars():
    q: ListCarsQuery = g.validated_query

    with SessionLocal() as s:
        query = s.query(Car)
        if q.status != "all":
            query = query.filter(Car.status == q.status)

        total = query.with_entities(func.count(Car.id)).scalar() or 0
        rows = (
            query.order_by(Car.created_at.desc(), Car.make.asc())
            .limit(q.limit)
            .offset(q.offset)
            .all()
        )

        return responses.success_with_pagination(
            [_car_to_dict(c) for c in rows],
            {
                "total": total,
                "limit": q.limit,
                "offset": q.offset,
                "hasMore": q.offset + len(rows) < total,
            },
        )


@bp.get("/<car_id>")
def get_car(car_id: str):
    cid = parse_uuid(car_id)
    with SessionLocal() as s:
        car = s.get(Car, cid) if cid else None
        if car is None:
            return responses.not_found("Car")
        return responses.success(_car_to_dict(car))


@bp.post("")
@validate(CreateCar)
def create_car():
    body: CreateCar = g.validated_body

    with SessionLocal() as s:
        car = Car(
            make=body.make,
            model=body.model,
            variant=body.variant,
            body_type=body.body_type or None,
            status=body.status,
            data=body.data,
        )
        s.add(car)
        try:
            s.commit()
        except IntegrityError:
            s.rollback()
            return responses.conflict(
                f"{body.make} {body.model} {body.variant}".strip() + " already exists"
            )
        s.refresh(car)
        return responses.success(_car_to_dict(car), 201)


@bp.patch("/<car_id>")
@validate(UpdateCar)
def update_car(car_id: str):
    body: UpdateCar = g.validated_body
    changes = body.model_dump(exclude_unset=True)

    cid = parse_uuid(car_id)
    with SessionLocal() as s:
        car = s.get(Car, cid) if cid else None
        if car is None:
            return responses.not_found("Car")

        for field, value in changes.items():
            if field == "body_type":
                value = value or None
            setattr(car, _UPDATABLE[field], value)

        try:
            s.commit()
        except IntegrityError:
            s.rollback()
            return responses.conflict("Another car already uses this make/model/variant")
        s.refresh(car)
        return responses.success(_car_to_dict(car))
