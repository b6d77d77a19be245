"""
Tests for the in-memory user store.

Covers id assignment, email uniqueness, partial updates, pagination
snapshots and behaviour under concurrent callers.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest
from roster.modules.users.domain.user import UserPayload
from roster.modules.users.domain.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    ConflictError,
)
from roster.modules.users.repositories.user_repository import UserRepository


@pytest.fixture
def seeded(repository, payload):
    repository.create(payload("Alice Johnson", "alice.johnson@techhive.com", "HR Manager"))
    repository.create(payload("Bob Smith", "bob.smith@techhive.com", "IT Admin"))
    return repository


class TestCreate:

    def test_first_user_gets_id_one(self, repository, payload):
        user = repository.create(payload())
        assert user.id == 1

    def test_ids_strictly_increase(self, repository, payload):
        ids = [
            repository.create(payload(email=f"user{i}@example.com")).id
            for i in range(5)
        ]
        assert ids == [1, 2, 3, 4, 5]

    def test_fields_are_trimmed(self, repository, payload):
        user = repository.create(payload("  Carol  ", "  Carol@Example.com ", " Dev "))
        assert user.name == "Carol"
        assert user.email == "Carol@Example.com"
        assert user.role == "Dev"

    def test_duplicate_email_any_case_conflicts(self, seeded, payload):
        with pytest.raises(ConflictError):
            seeded.create(payload(email="ALICE.Johnson@TechHive.com"))
        assert seeded.count() == 2

    def test_id_is_max_plus_one_after_delete(self, seeded, payload):
        seeded.delete(1)
        user = seeded.create(UserPayload(name="X", email="x@y.com", role="Z"))
        assert user.id == 3

    def test_id_restarts_at_one_when_empty(self, seeded, payload):
        seeded.delete(1)
        seeded.delete(2)
        assert seeded.create(payload()).id == 1


class TestGet:

    def test_get_existing(self, seeded):
        assert seeded.get(2).name == "Bob Smith"

    def test_get_missing(self, seeded):
        with pytest.raises(NotFoundError) as exc_info:
            seeded.get(999)
        assert exc_info.value.user_id == 999


class TestUpdate:

    def test_only_supplied_fields_change(self, seeded):
        user = seeded.update(1, UserPayload(role="  Director "))
        assert user.role == "Director"
        assert user.name == "Alice Johnson"
        assert user.email == "alice.johnson@techhive.com"
        assert seeded.get(1) == user

    def test_blank_fields_are_left_unchanged(self, seeded):
        user = seeded.update(1, UserPayload(name="", email="   ", role=None))
        assert user.name == "Alice Johnson"
        assert user.email == "alice.johnson@techhive.com"
        assert user.role == "HR Manager"

    def test_own_email_in_other_case_is_not_a_conflict(self, seeded):
        user = seeded.update(1, UserPayload(email="ALICE.JOHNSON@techhive.com"))
        assert user.email == "ALICE.JOHNSON@techhive.com"

    def test_email_of_another_user_conflicts(self, seeded):
        with pytest.raises(ConflictError):
            seeded.update(1, UserPayload(name="Changed", email="Bob.Smith@techhive.com"))
        # Nothing applied, not even the name
        assert seeded.get(1).name == "Alice Johnson"

    def test_missing_user(self, seeded):
        with pytest.raises(NotFoundError):
            seeded.update(42, UserPayload(name="Nobody"))

    def test_update_keeps_list_position(self, seeded):
        seeded.update(1, UserPayload(name="Alice J."))
        assert [u.id for u in seeded.list(1, 20).items] == [1, 2]


class TestDelete:

    def test_delete_removes_user(self, seeded):
        seeded.delete(1)
        assert seeded.count() == 1
        with pytest.raises(NotFoundError):
            seeded.get(1)

    def test_delete_missing_leaves_store_unchanged(self, seeded):
        with pytest.raises(NotFoundError):
            seeded.delete(999)
        assert seeded.count() == 2


class TestList:

    def test_first_page_of_seeded_store(self, seeded):
        page = seeded.list(1, 20)
        assert page.total == 2
        assert [u.name for u in page.items] == ["Alice Johnson", "Bob Smith"]

    def test_slicing(self, repository, payload):
        for i in range(5):
            repository.create(payload(email=f"user{i}@example.com"))
        page = repository.list(2, 2)
        assert [u.id for u in page.items] == [3, 4]
        assert page.total == 5
        assert repository.list(3, 2).items[0].id == 5
        assert repository.list(4, 2).items == []

    @pytest.mark.parametrize("page,page_size", [(0, 20), (-1, 20), (1, 0), (1, 201)])
    def test_invalid_pagination(self, seeded, page, page_size):
        with pytest.raises(InvalidArgumentError):
            seeded.list(page, page_size)

    def test_max_page_size_is_accepted(self, seeded):
        assert seeded.list(1, 200).total == 2

    def test_snapshot_is_isolated_from_later_mutations(self, seeded, payload):
        page = seeded.list(1, 20)
        seeded.update(1, UserPayload(name="Renamed"))
        seeded.delete(2)
        seeded.create(payload())
        assert [u.name for u in page.items] == ["Alice Johnson", "Bob Smith"]
        assert page.total == 2

    def test_returned_users_are_immutable(self, seeded):
        user = seeded.get(1)
        with pytest.raises(AttributeError):
            user.name = "Mallory"


class TestConcurrency:

    def test_concurrent_creates_are_not_lost(self, repository):
        count = 200

        def create(i):
            return repository.create(
                UserPayload(name=f"User {i}", email=f"user{i}@example.com", role="Staff")
            ).id

        with ThreadPoolExecutor(max_workers=16) as pool:
            ids = list(pool.map(create, range(count)))

        assert sorted(ids) == list(range(1, count + 1))
        assert repository.count() == count

    def test_concurrent_duplicate_email_only_one_wins(self, repository):
        def create(i):
            try:
                repository.create(UserPayload(name=f"User {i}", email="same@example.com", role="Staff"))
                return True
            except ConflictError:
                return False

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(create, range(50)))

        assert results.count(True) == 1
        assert repository.count() == 1

    def test_concurrent_updates_and_reads_keep_invariants(self, repository):
        for i in range(20):
            repository.create(UserPayload(name=f"User {i}", email=f"user{i}@example.com", role="Staff"))

        def mutate(i):
            user_id = (i % 20) + 1
            try:
                repository.update(user_id, UserPayload(email=f"user{(i + 1) % 20}@example.com"))
            except ConflictError:
                pass
            return repository.list(1, 200)

        with ThreadPoolExecutor(max_workers=8) as pool:
            pages = list(pool.map(mutate, range(200)))

        for page in pages:
            emails = [u.email.lower() for u in page.items]
            assert len(emails) == len(set(emails))
            assert page.total == 20


def test_custom_max_page_size():
    repository = UserRepository(max_page_size=10)
    with pytest.raises(InvalidArgumentError):
        repository.list(1, 11)


def test_emails_differing_beyond_case_are_distinct(repository):
    repository.create(UserPayload(name="Street", email="strasse@example.com", role="Staff"))
    user = repository.create(UserPayload(name="Strasse", email="straße@example.com", role="Staff"))
    assert user.id == 2
    with pytest.raises(ConflictError):
        repository.create(UserPayload(name="Upper", email="STRASSE@example.com", role="Staff"))
