"""
Tests for the in-memory persons repository adapter.

Covers the repository contract and per-key atomicity under
concurrent access from tasks and threads.
"""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

import pytest

from person_registry.domain.persons.entities import Person
from person_registry.domain.persons.errors import (
    PersonAlreadyExists,
    PersonDoesNotExist,
)
from person_registry.domain.persons.results import (
    CreateResult,
    DeleteResult,
    Failure,
    Success,
)
from person_registry.infrastructure.persons.in_memory_repository import (
    InMemoryPersonsRepository,
)


def _person(first_name: str = "Ada") -> Person:
    return Person(
        id=uuid4(),
        first_name=first_name,
        last_name="Lovelace",
        student_id="S1",
        gender="F",
    )


class TestCreateAndRead:
    """Tests for create and read."""

    @pytest.mark.asyncio
    async def test_create_then_read_round_trip(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        person = _person()
        outcome = await repository.create(person)

        assert outcome == Success(CreateResult(person))
        assert await repository.read(person.id) == person

    @pytest.mark.asyncio
    async def test_read_missing_returns_none(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        assert await repository.read(uuid4()) is None

    @pytest.mark.asyncio
    async def test_duplicate_create_fails(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        person = _person()
        await repository.create(person)

        outcome = await repository.create(person.with_changes(first_name="Eve"))

        assert outcome == Failure(PersonAlreadyExists(person.id))
        assert (await repository.read(person.id)).first_name == "Ada"
        assert len(repository) == 1


class TestUpdate:
    """Tests for full-replacement update."""

    @pytest.mark.asyncio
    async def test_update_replaces_value(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        person = _person()
        await repository.create(person)
        replacement = person.with_changes(first_name="Grace")

        outcome = await repository.update(replacement)

        assert isinstance(outcome, Success)
        assert outcome.value.person == replacement
        assert await repository.read(person.id) == replacement

    @pytest.mark.asyncio
    async def test_update_missing_fails(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        person = _person()
        outcome = await repository.update(person)

        assert outcome == Failure(PersonDoesNotExist(person.id))
        assert await repository.read(person.id) is None


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_entry(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        person = _person()
        await repository.create(person)

        outcome = await repository.delete(person.id)

        assert outcome == Success(DeleteResult(person.id))
        assert await repository.read(person.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_always_not_found(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        """Deleting a missing id yields PersonDoesNotExist every time."""
        person_id = uuid4()
        for _ in range(3):
            outcome = await repository.delete(person_id)
            assert outcome == Failure(PersonDoesNotExist(person_id))

    @pytest.mark.asyncio
    async def test_second_delete_fails(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        person = _person()
        await repository.create(person)
        await repository.delete(person.id)

        assert isinstance(await repository.delete(person.id), Failure)


class TestAll:
    """Tests for listing."""

    @pytest.mark.asyncio
    async def test_all_returns_every_entry(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        persons = [_person(name) for name in ("Ada", "Grace", "Edsger")]
        for person in persons:
            await repository.create(person)

        stored = await repository.all()

        assert sorted(stored, key=lambda p: p.first_name) == sorted(
            persons, key=lambda p: p.first_name
        )

    @pytest.mark.asyncio
    async def test_all_on_empty_store(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        assert await repository.all() == []


class TestConcurrency:
    """Tests for per-key atomicity."""

    @pytest.mark.asyncio
    async def test_concurrent_creates_same_id_one_wins(
        self, repository: InMemoryPersonsRepository
    ) -> None:
        person = _person()
        outcomes = await asyncio.gather(
            repository.create(person),
            repository.create(person.with_changes(first_name="Eve")),
        )

        successes = [o for o in outcomes if isinstance(o, Success)]
        failures = [o for o in outcomes if isinstance(o, Failure)]
        assert len(successes) == 1
        assert failures == [Failure(PersonAlreadyExists(person.id))]

    def test_threaded_creates_same_id_one_wins(self) -> None:
        """Creates racing from many threads on one id: exactly one succeeds."""
        repository = InMemoryPersonsRepository(stripes=4)
        person = _person()
        workers = 8
        barrier = threading.Barrier(workers)

        def attempt(index: int):
            barrier.wait()
            candidate = person.with_changes(first_name=f"Ada-{index}")
            return asyncio.run(repository.create(candidate))

        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(pool.map(attempt, range(workers)))

        assert sum(1 for o in outcomes if isinstance(o, Success)) == 1
        assert sum(1 for o in outcomes if isinstance(o, Failure)) == workers - 1
        assert len(repository) == 1

    def test_threaded_create_delete_different_ids(self) -> None:
        repository = InMemoryPersonsRepository(stripes=2)
        persons = [_person(f"P{i}") for i in range(50)]

        def create_then_delete(person: Person) -> bool:
            created = asyncio.run(repository.create(person))
            deleted = asyncio.run(repository.delete(person.id))
            return created.is_success and deleted.is_success

        with ThreadPoolExecutor(max_workers=8) as pool:
            assert all(pool.map(create_then_delete, persons))
        assert len(repository) == 0


class TestConstruction:
    def test_stripes_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            InMemoryPersonsRepository(stripes=0)
