# tests/test_reviewer_ledger.py
"""Tests for reviewer workload counters."""

import pytest
from sqlalchemy.orm import sessionmaker

from tests.conftest import BASE_TIME
from wheel_spinner.models import Admin
from wheel_spinner.repositories.admin_repo import AdminRepository
from wheel_spinner.services.errors import InvalidTransitionError, NotFoundError
from wheel_spinner.services.reviewer_ledger import ReviewerLedger


@pytest.fixture()
def ledger(db_session) -> ReviewerLedger:
    return ReviewerLedger(AdminRepository(db_session))


def test_record_decision_increments_both_counters(ledger, reviewer, db_session) -> None:
    assert ledger.record_decision("default", BASE_TIME) is True
    assert ledger.record_decision("default", BASE_TIME) is True
    db_session.commit()

    admin = db_session.get(Admin, "default", populate_existing=True)
    assert admin.total_reviews == 2
    assert admin.session_reviews == 2


def test_increment_is_computed_by_the_database(ledger, reviewer, db_session, engine) -> None:
    # A second session holding a stale row must not overwrite the first increment.
    other_session = sessionmaker(bind=engine)()
    try:
        stale = other_session.get(Admin, "default")
        assert stale.total_reviews == 0

        ledger.record_decision("default", BASE_TIME)
        db_session.commit()

        ReviewerLedger(AdminRepository(other_session)).record_decision("default", BASE_TIME)
        other_session.commit()
    finally:
        other_session.close()

    assert db_session.get(Admin, "default", populate_existing=True).total_reviews == 2


def test_record_decision_for_unknown_reviewer_is_ignored(ledger, db_session) -> None:
    assert ledger.record_decision("ghost", BASE_TIME) is False
    assert db_session.get(Admin, "ghost") is None


def test_reset_session_keeps_totals(service, reviewer, db_session) -> None:
    reviewer.total_reviews = 7
    reviewer.session_reviews = 3
    db_session.commit()

    service.reset_reviewer_session("default")

    admin = db_session.get(Admin, "default", populate_existing=True)
    assert admin.session_reviews == 0
    assert admin.total_reviews == 7


def test_reset_totals_zeroes_both(service, reviewer, db_session) -> None:
    reviewer.total_reviews = 7
    reviewer.session_reviews = 3
    db_session.commit()

    service.reset_reviewer_totals("default")

    admin = db_session.get(Admin, "default", populate_existing=True)
    assert admin.session_reviews == 0
    assert admin.total_reviews == 0


def test_resets_for_unknown_reviewer_raise(service) -> None:
    with pytest.raises(NotFoundError):
        service.reset_reviewer_totals("ghost")
    with pytest.raises(NotFoundError):
        service.reset_reviewer_session("ghost")


def test_register_renames_without_touching_counters(service, reviewer, db_session) -> None:
    reviewer.total_reviews = 4
    db_session.commit()

    service.register_reviewer("default", "Renamed")

    admin = db_session.get(Admin, "default", populate_existing=True)
    assert admin.name == "Renamed"
    assert admin.total_reviews == 4


def test_register_and_remove(service) -> None:
    service.register_reviewer("b", "Bea")
    service.register_reviewer("a", "Al")

    assert [a.name for a in service.list_reviewers()] == ["Al", "Bea"]

    service.remove_reviewer("a")
    assert [a.uid for a in service.list_reviewers()] == ["b"]

    with pytest.raises(NotFoundError):
        service.remove_reviewer("a")


def test_register_rejects_blank_input(service) -> None:
    with pytest.raises(InvalidTransitionError):
        service.register_reviewer("", "Name")
    with pytest.raises(InvalidTransitionError):
        service.register_reviewer("uid", "  ")
