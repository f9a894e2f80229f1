# =============================================================================
# File: tests/test_seeds.py
# Purpose: Seed scripts are idempotent, count per-row failures and exit 1
#          when the whole run fails.
# =============================================================================
import logging

import pytest
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash

from mrgcar.db import SessionLocal
from mrgcar.models import AdminUser, Car, ForumCategory, ForumPost, News
from mrgcar.seeds import admin as admin_seed
from mrgcar.seeds import cars as cars_seed
from mrgcar.seeds.base import load_dataset
from mrgcar.seeds.cars import extract_body_type, flatten_cars, seed_cars
from mrgcar.seeds.cars_turkish import seed_cars_turkish
from mrgcar.seeds.forum import seed_forum
from mrgcar.seeds.forum_counts import recalculate_forum_counts
from mrgcar.seeds.news import seed_news


def _count(model) -> int:
    with SessionLocal() as s:
        return s.query(func.count()).select_from(model).scalar()


# ==================== CARS ====================
def test_flatten_cars_unwraps_nested_lists():
    cars = [{"make": "A", "model": "B"}]
    assert flatten_cars(cars) == cars
    assert flatten_cars([cars]) == cars
    assert flatten_cars([[cars]]) == cars
    assert flatten_cars([]) == []


@pytest.mark.parametrize(
    "car,expected",
    [
        ({"vehicle": {"body_type": "Hatchback"}, "style": "4dr Sedan"}, "Hatchback"),
        ({"vehicle": {"body_type": "  "}, "style": "4dr Sedan"}, "Sedan"),
        ({"style": "4dr SUV AWD"}, "SUV"),
        ({"style": "Double Cab Truck"}, "Pickup"),
        ({"style": "Cargo Van"}, "Van"),
        ({"style": "5dr Sportswagon"}, "Wagon"),
        ({"style": "Roadster"}, None),
        ({}, None),
    ],
)
def test_extract_body_type(car, expected):
    assert extract_body_type(car) == expected


def test_seed_cars_is_idempotent():
    first = seed_cars()
    assert first.inserted == 8
    assert first.updated == 0
    assert first.errors == 0
    assert _count(Car) == 8

    second = seed_cars()
    assert second.inserted == 0
    assert second.updated == 8
    assert _count(Car) == 8


def test_seed_cars_columns():
    seed_cars()
    with SessionLocal() as s:
        body_types = {c.model: c.body_type for c in s.query(Car)}
        golf = s.query(Car).filter_by(make="Volkswagen", model="Golf").one()
        clio = s.query(Car).filter_by(make="Renault", model="Clio").one()

    assert body_types["Corolla"] == "Sedan"
    assert body_types["X5"] == "SUV"
    assert body_types["Ranger"] == "Pickup"
    assert body_types["Doblo"] == "Van"
    assert body_types["508"] == "Wagon"

    assert golf.variant == "1.5 eTSI Life 5dr Hatchback"
    assert golf.status == "published"
    assert golf.data["style"] == "5dr Hatchback"
    assert "make" not in golf.data
    # brand + trim when make / trim_and_style are missing
    assert clio.variant == "1.0 TCe Touch"


def test_seed_cars_update_keeps_status():
    seed_cars([{"make": "Opel", "model": "Astra", "style": "5dr Hatchback"}])
    with SessionLocal() as s:
        car = s.query(Car).filter_by(make="Opel").one()
        car.status = "draft"
        s.commit()

    report = seed_cars([{"make": "Opel", "model": "Astra", "style": "4dr Sedan", "year": 2024}])
    assert report.updated == 1

    with SessionLocal() as s:
        car = s.query(Car).filter_by(make="Opel").one()
    assert car.status == "draft"
    assert car.body_type == "Sedan"
    assert car.data == {"style": "4dr Sedan", "year": 2024}


def test_seed_cars_counts_bad_rows_and_continues(caplog):
    caplog.set_level(logging.WARNING, logger="mrgcar")
    report = seed_cars(
        [
            {"model": "NoMake"},
            "not a record",
            {"make": "Dacia", "model": "Duster", "style": "4dr SUV"},
        ]
    )
    assert report.errors == 2
    assert report.inserted == 1
    assert report.processed == 3
    assert _count(Car) == 1
    assert any("without make/model" in r.getMessage() for r in caplog.records)


def test_seed_cars_turkish():
    report = seed_cars_turkish()
    assert report.inserted == 5
    assert report.errors == 0

    with SessionLocal() as s:
        togg = s.query(Car).filter_by(make="Togg").one()
        egea = s.query(Car).filter_by(make="Fiat", model="Egea").one()

    assert togg.body_type == "SUV"
    assert egea.body_type == "Sedan"
    assert set(togg.data) >= {"performanceData", "efficiencyData", "imageUrls"}

    assert seed_cars_turkish().updated == 5
    assert _count(Car) == 5


def test_seed_cars_turkish_missing_make_is_a_row_error():
    report = seed_cars_turkish([{"model": "Kartal"}, {"make": "Tofaş", "model": "Şahin"}])
    assert report.errors == 1
    assert report.inserted == 1


def test_cars_main_exits_1_on_fatal_error(monkeypatch):
    def _broken(*args, **kwargs):
        raise ValueError("cars.yml: 'cars' is not a list")

    monkeypatch.setattr(cars_seed, "load_dataset", _broken)
    with pytest.raises(SystemExit) as exc_info:
        cars_seed.main()
    assert exc_info.value.code == 1


def test_load_dataset_rejects_missing_key():
    with pytest.raises(ValueError):
        load_dataset("cars.yml", "trucks")
    with pytest.raises(FileNotFoundError):
        load_dataset("nope.yml", "cars")


# ==================== ADMIN ====================
def test_seed_admin_creates_then_updates(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "Boss@MrgCar.com ")
    monkeypatch.setenv("ADMIN_PASSWORD", "first-secret")
    assert admin_seed.seed_admin() is True

    monkeypatch.setenv("ADMIN_PASSWORD", "second-secret")
    assert admin_seed.seed_admin() is False

    with SessionLocal() as s:
        users = s.query(AdminUser).all()
    assert len(users) == 1
    assert users[0].email == "boss@mrgcar.com"
    assert users[0].role == "admin"
    assert check_password_hash(users[0].password_hash, "second-secret")
    assert not check_password_hash(users[0].password_hash, "first-secret")


def test_seed_admin_never_prints_password(capsys):
    admin_seed.seed_admin("admin@mrgcar.com", "very-secret-pw")
    out = capsys.readouterr().out
    assert "admin@mrgcar.com" in out
    assert "very-secret-pw" not in out


def test_seed_admin_defaults_warn(caplog):
    caplog.set_level(logging.WARNING, logger="mrgcar")
    admin_seed.seed_admin()

    with SessionLocal() as s:
        user = s.query(AdminUser).one()
    assert user.email == "admin@mrgcar.com"
    assert check_password_hash(user.password_hash, "admin123")
    assert any("ADMIN_PASSWORD" in r.getMessage() for r in caplog.records)


def test_admin_main_exits_1_without_database(monkeypatch):
    def _no_db(*args, **kwargs):
        raise RuntimeError("could not connect to server")

    monkeypatch.setattr(admin_seed, "seed_admin", _no_db)
    with pytest.raises(SystemExit) as exc_info:
        admin_seed.main()
    assert exc_info.value.code == 1


# ==================== FORUM ====================
def test_seed_forum_is_idempotent():
    cats, posts = seed_forum()
    assert (cats.inserted, posts.inserted) == (6, 5)

    cats, posts = seed_forum()
    assert (cats.inserted, cats.updated) == (0, 6)
    assert (posts.inserted, posts.updated) == (0, 5)

    assert _count(ForumCategory) == 6
    assert _count(ForumPost) == 5


def test_seed_forum_bad_post_is_counted():
    cats, posts = seed_forum(
        categories=[{"id": "general", "name": "Genel Sohbet"}],
        posts=[
            {"category_id": "general", "user_name": "x"},
            {"category_id": "general", "title": "Merhaba", "user_name": "x"},
        ],
    )
    assert cats.inserted == 1
    assert posts.errors == 1
    assert posts.inserted == 1


def test_recalculate_forum_counts():
    seed_forum()
    rows = recalculate_forum_counts()

    counts = {r.id: (r.post_count, r.member_count) for r in rows}
    assert counts["buying"] == (0, 0)
    assert counts["general"] == (1, 1)
    assert sum(p for p, _ in counts.values()) == 5

    # busiest first, ties by name
    assert rows[-1].id == "buying"
    names = [r.name for r in rows[:-1]]
    assert names == sorted(names)


def test_recalculate_counts_distinct_members():
    seed_forum(
        categories=[{"id": "general", "name": "Genel Sohbet"}],
        posts=[
            {"category_id": "general", "title": "bir", "user_name": "ali"},
            {"category_id": "general", "title": "iki", "user_name": "ali"},
            {"category_id": "general", "title": "üç", "user_name": "ayşe"},
        ],
    )
    (general,) = recalculate_forum_counts()
    assert general.post_count == 3
    assert general.member_count == 2


# ==================== NEWS ====================
def test_seed_news_is_idempotent():
    first = seed_news()
    assert first.inserted == 4
    second = seed_news()
    assert second.updated == 4
    assert _count(News) == 4

    with SessionLocal() as s:
        tags = [n.tags for n in s.query(News)]
    assert all(isinstance(t, list) for t in tags)


def test_seed_news_counts_bad_rows_and_continues():
    report = seed_news(
        [
            "not a record",
            {"content": "no title"},
            {"title": "Yeni Egea Cross tanıtıldı", "tags": ["Fiat"]},
        ]
    )
    assert report.errors == 2
    assert report.inserted == 1
    assert _count(News) == 1


# ==================== MALFORMED ROWS ====================
def test_seed_cars_turkish_skips_non_dict_rows():
    report = seed_cars_turkish(["not a record", {"make": "Togg", "model": "T10X"}])
    assert report.errors == 1
    assert report.inserted == 1


def test_seed_forum_skips_non_dict_rows():
    cats, posts = seed_forum(
        categories=["not a record", {"id": "general", "name": "Genel Sohbet"}],
        posts=[42, {"category_id": "general", "title": "Merhaba", "user_name": "x"}],
    )
    assert (cats.errors, cats.inserted) == (1, 1)
    assert (posts.errors, posts.inserted) == (1, 1)


# ==================== UNIQUE KEYS ====================
def test_forum_post_key_is_unique_in_the_database():
    seed_forum(categories=[{"id": "general", "name": "Genel Sohbet"}], posts=[])
    with SessionLocal() as s:
        s.add(ForumPost(user_name="a", title="Aynı başlık", category_id="general"))
        s.commit()
        s.add(ForumPost(user_name="b", title="Aynı başlık", category_id="general"))
        with pytest.raises(IntegrityError):
            s.commit()


def test_news_title_is_unique_in_the_database():
    with SessionLocal() as s:
        s.add(News(title="Aynı haber"))
        s.commit()
        s.add(News(title="Aynı haber"))
        with pytest.raises(IntegrityError):
            s.commit()
