import logging

import pytest

from exceptions import OwnerNotFoundError
from models import Owner
from services.owner_service import OwnerService


def test_create_owner(owner_service, test_owner):
    new_owner = owner_service.create(test_owner)

    assert new_owner.id is not None
    assert new_owner.first_name == "John"
    assert new_owner.last_name == "Doe"
    assert new_owner.address == "123 Main St"
    assert new_owner.city == "Springfield"
    assert new_owner.telephone == "555-1234"


def test_create_assigns_distinct_ids(owner_service):
    first = owner_service.create(Owner(last_name="Doe"))
    second = owner_service.create(Owner(last_name="Doe"))

    assert first.id != second.id


def test_create_owner_with_no_fields(owner_service):
    created = owner_service.create(Owner())

    found = owner_service.find_by_id(created.id)
    assert found.to_dict() == {
        'id': created.id,
        'first_name': None,
        'last_name': None,
        'address': None,
        'city': None,
        'telephone': None,
    }


def test_find_owner_by_id(owner_service, test_owner):
    created = owner_service.create(test_owner)
    expected = created.to_dict()

    found = owner_service.find_by_id(created.id)

    assert found.to_dict() == expected


def test_find_owner_by_id_missing(owner_service):
    with pytest.raises(OwnerNotFoundError) as exc_info:
        owner_service.find_by_id(424242)

    assert exc_info.value.owner_id == 424242
    assert "424242" in str(exc_info.value)


def test_find_owner_by_last_name(owner_service, test_owner):
    created = owner_service.create(test_owner)
    owner_service.create(Owner(first_name="Other", last_name="Roe"))

    owners = owner_service.find_by_last_name("Doe")

    assert len(owners) > 0
    assert all(o.last_name == "Doe" for o in owners)
    match = [o for o in owners if o.id == created.id]
    assert len(match) == 1
    assert match[0].first_name == "John"
    assert match[0].address == "123 Main St"
    assert match[0].city == "Springfield"
    assert match[0].telephone == "555-1234"


def test_find_owner_by_last_name_returns_all_matches(owner_service):
    owner_service.create(Owner(first_name="Ann", last_name="Doe"))
    owner_service.create(Owner(first_name="Bob", last_name="Doe"))
    owner_service.create(Owner(first_name="Cid", last_name="Doeson"))

    owners = owner_service.find_by_last_name("Doe")

    assert sorted(o.first_name for o in owners) == ["Ann", "Bob"]


def test_find_owner_by_last_name_no_match(owner_service, test_owner):
    owner_service.create(test_owner)

    assert owner_service.find_by_last_name("Nobody") == []


def test_find_owner_by_last_name_logs_each_owner(owner_service, test_owner, caplog):
    owner_service.create(test_owner)

    with caplog.at_level(logging.INFO, logger="services.owner_service"):
        owner_service.find_by_last_name("Doe")

    assert any("Owner: Owner(" in r.getMessage() for r in caplog.records)


def test_update_owner(owner_service, test_owner):
    created = owner_service.create(test_owner)
    owner_id = created.id

    created.first_name = "Jane"
    created.last_name = "Smith"
    created.address = "742 Evergreen Terrace"
    created.city = "Shelbyville"
    created.telephone = "555-9876"
    updated = owner_service.update(created)

    assert updated.id == owner_id
    found = owner_service.find_by_id(owner_id)
    assert found.id == owner_id
    assert found.first_name == "Jane"
    assert found.last_name == "Smith"
    assert found.address == "742 Evergreen Terrace"
    assert found.city == "Shelbyville"
    assert found.telephone == "555-9876"


def test_update_owner_partial_data(owner_service, test_owner):
    created = owner_service.create(test_owner)
    owner_id = created.id

    created.address = "Av. Los Próceres 123"
    created.telephone = "999-111-222"
    owner_service.update(created)

    found = owner_service.find_by_id(owner_id)
    assert found.address == "Av. Los Próceres 123"
    assert found.telephone == "999-111-222"
    assert found.first_name == "John"
    assert found.last_name == "Doe"
    assert found.city == "Springfield"


def test_update_owner_with_null_fields(owner_service, test_owner):
    created = owner_service.create(test_owner)
    owner_id = created.id

    created.address = None
    created.telephone = None
    owner_service.update(created)

    found = owner_service.find_by_id(owner_id)
    assert found.address is None
    assert found.telephone is None
    assert found.first_name == "John"


def test_update_from_detached_owner_replaces_every_field(owner_service, db_session, test_owner):
    created = owner_service.create(test_owner)
    owner_id = created.id

    # Fields not given are replaced with null, not merged
    owner_service.update(Owner(id=owner_id, first_name="Jane", city="Shelbyville"))
    db_session.expire_all()

    found = owner_service.find_by_id(owner_id)
    assert found.to_dict() == {
        'id': owner_id,
        'first_name': "Jane",
        'last_name': None,
        'address': None,
        'city': "Shelbyville",
        'telephone': None,
    }


def test_update_nonexistent_owner(owner_service, db_session, test_owner):
    owner_service.create(test_owner)
    before = db_session.query(Owner).count()

    ghost = Owner(
        id=999999,
        first_name="Ghost",
        last_name="Owner",
        address="Unknown",
        city="Nowhere",
        telephone="000-0000",
    )
    with pytest.raises(OwnerNotFoundError) as exc_info:
        owner_service.update(ghost)

    assert "999999" in exc_info.value.message
    assert exc_info.value.details == {"owner_id": 999999}
    assert db_session.query(Owner).count() == before
    assert owner_service.find_by_last_name("Owner") == []


def test_update_owner_without_id(owner_service, db_session):
    before = db_session.query(Owner).count()

    with pytest.raises(OwnerNotFoundError) as exc_info:
        owner_service.update(Owner(first_name="Null", last_name="ID"))

    assert exc_info.value.owner_id is None
    assert exc_info.value.message == "Owner not found with id: None"
    assert db_session.query(Owner).count() == before


def test_service_uses_injected_repository(db_session, test_owner):
    class RecordingRepository:
        def __init__(self):
            self.saved = []

        def save(self, owner):
            owner.id = 7
            self.saved.append(owner)
            return owner

        def find_by_id(self, owner_id):
            return None

        def find_by_last_name(self, last_name):
            return []

    repo = RecordingRepository()
    service = OwnerService(db_session, repo)

    assert service.create(test_owner).id == 7
    assert repo.saved == [test_owner]
    with pytest.raises(OwnerNotFoundError):
        service.update(test_owner)
    assert len(repo.saved) == 1
