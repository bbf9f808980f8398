from __future__ import annotations

import uuid
from datetime import date

import pytest

from subscriptions_api.core.exceptions import SubscriptionNotFoundError
from subscriptions_api.models import Subscription
from subscriptions_api.repositories import SQLAlchemySubscriptionRepository


def make_subscription(user_id, service_name="Netflix", price=15, start=date(2024, 1, 1), end=None):
    return Subscription(
        service_name=service_name,
        price=price,
        user_id=user_id,
        start_date=start,
        end_date=end,
    )


@pytest.fixture
def repo(db_session):
    return SQLAlchemySubscriptionRepository(db_session)


def test_create_assigns_distinct_ids(repo, user_id):
    first = repo.create(make_subscription(user_id))
    second = repo.create(make_subscription(user_id))
    assert isinstance(first.id, uuid.UUID)
    assert first.id != second.id
    assert first.created_at is not None


def test_get_by_id_round_trip(repo, user_id):
    created = repo.create(make_subscription(user_id, end=date(2024, 6, 1)))
    fetched = repo.get_by_id(created.id)
    assert fetched.service_name == "Netflix"
    assert fetched.price == 15
    assert fetched.user_id == user_id
    assert fetched.start_date == date(2024, 1, 1)
    assert fetched.end_date == date(2024, 6, 1)


def test_get_by_id_missing_raises_not_found(repo):
    with pytest.raises(SubscriptionNotFoundError):
        repo.get_by_id(uuid.uuid4())


def test_update_replaces_every_mutable_field(repo, user_id):
    created = repo.create(make_subscription(user_id, end=date(2024, 12, 1)))
    other_user = uuid.uuid4()
    replacement = Subscription(
        id=created.id,
        service_name="Spotify",
        price=7,
        user_id=other_user,
        start_date=date(2023, 3, 1),
        end_date=None,
    )
    updated = repo.update(replacement)
    assert updated.id == created.id
    assert updated.service_name == "Spotify"
    assert updated.price == 7
    assert updated.user_id == other_user
    assert updated.start_date == date(2023, 3, 1)
    assert updated.end_date is None


def test_update_missing_raises_not_found(repo, user_id):
    ghost = make_subscription(user_id)
    ghost.id = uuid.uuid4()
    with pytest.raises(SubscriptionNotFoundError):
        repo.update(ghost)


def test_delete_is_soft(repo, db_session, user_id):
    created = repo.create(make_subscription(user_id))
    repo.delete(created.id)

    with pytest.raises(SubscriptionNotFoundError):
        repo.get_by_id(created.id)
    assert repo.list() == []

    db_session.expire_all()
    row = db_session.get(Subscription, created.id)
    assert row is not None
    assert row.deleted_at is not None


def test_delete_twice_raises_not_found(repo, user_id):
    created = repo.create(make_subscription(user_id))
    repo.delete(created.id)
    with pytest.raises(SubscriptionNotFoundError):
        repo.delete(created.id)


def test_deleted_rows_cannot_be_updated(repo, user_id):
    created = repo.create(make_subscription(user_id))
    repo.delete(created.id)
    replacement = make_subscription(user_id, price=99)
    replacement.id = created.id
    with pytest.raises(SubscriptionNotFoundError):
        repo.update(replacement)


def test_list_returns_only_live_rows(repo, user_id):
    kept = repo.create(make_subscription(user_id, service_name="Kept"))
    gone = repo.create(make_subscription(user_id, service_name="Gone"))
    repo.delete(gone.id)
    assert [s.id for s in repo.list()] == [kept.id]


def test_cost_includes_subscription_touching_range_start(repo, user_id):
    repo.create(make_subscription(user_id, start=date(2024, 3, 1), end=date(2024, 5, 1)))
    assert repo.calculate_total_cost(None, None, date(2024, 5, 1), date(2024, 6, 1)) == 15


def test_cost_excludes_subscription_ended_before_range(repo, user_id):
    repo.create(make_subscription(user_id, start=date(2024, 3, 1), end=date(2024, 5, 1)))
    assert repo.calculate_total_cost(None, None, date(2024, 6, 1), date(2024, 12, 1)) == 0


def test_cost_includes_subscription_starting_on_range_end(repo, user_id):
    repo.create(make_subscription(user_id, start=date(2024, 6, 1)))
    assert repo.calculate_total_cost(None, None, date(2024, 1, 1), date(2024, 6, 1)) == 15
    assert repo.calculate_total_cost(None, None, date(2024, 1, 1), date(2024, 5, 1)) == 0


def test_cost_open_ended_subscription_extends_forever(repo, user_id):
    repo.create(make_subscription(user_id, start=date(2020, 1, 1)))
    assert repo.calculate_total_cost(None, None, date(2999, 1, 1), date(2999, 12, 1)) == 15
    assert repo.calculate_total_cost(None, None, date(2019, 1, 1), date(2020, 1, 1)) == 15
    assert repo.calculate_total_cost(None, None, date(2019, 1, 1), date(2019, 12, 1)) == 0


def test_cost_filters_narrow_the_total(repo, user_id):
    other_user = uuid.uuid4()
    repo.create(make_subscription(user_id, service_name="Netflix", price=15))
    repo.create(make_subscription(user_id, service_name="Spotify", price=10))
    repo.create(make_subscription(other_user, service_name="Netflix", price=20))
    start, end = date(2024, 1, 1), date(2024, 12, 1)

    everything = repo.calculate_total_cost(None, None, start, end)
    by_user = repo.calculate_total_cost(user_id, None, start, end)
    by_user_and_service = repo.calculate_total_cost(user_id, "Netflix", start, end)
    by_service = repo.calculate_total_cost(None, "Netflix", start, end)

    assert everything == 45
    assert by_user == 25
    assert by_user_and_service == 15
    assert by_service == 35
    assert by_user_and_service <= by_user <= everything


def test_cost_ignores_deleted_rows(repo, user_id):
    created = repo.create(make_subscription(user_id, price=40))
    repo.create(make_subscription(user_id, price=2))
    repo.delete(created.id)
    assert repo.calculate_total_cost(None, None, date(2024, 1, 1), date(2024, 1, 1)) == 2


def test_cost_with_no_rows_is_zero(repo):
    assert repo.calculate_total_cost(uuid.uuid4(), "Nothing", date(2024, 1, 1), date(2024, 2, 1)) == 0
