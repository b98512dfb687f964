import uuid

import pytest
from sqlalchemy import text

from emur.models.symptom import Symptom, SymptomUser
from emur.repositories.base import DuplicateRecordError, InvalidInputError, PersistenceError, RecordNotFoundError
from emur.repositories.symptom import SymptomRepository, SymptomUserRepository


def test_create_with_omit_discards_client_uuid(db):
    repo = SymptomRepository(db)
    supplied = uuid.uuid4()
    symptom = repo.create_with_omit(Symptom(uuid=supplied, name="Pain", scale=5), "uuid")
    db.commit()

    assert symptom.uuid is not None
    assert symptom.uuid != supplied
    assert repo.find_by_uuid(symptom.uuid).id == symptom.id


def test_find_by_uuid_accepts_strings(db):
    repo = SymptomRepository(db)
    symptom = repo.create_with_omit(Symptom(name="Pain", scale=5), "uuid")
    db.commit()
    assert repo.find_by_uuid(str(symptom.uuid)).name == "Pain"


@pytest.mark.parametrize("value", ["not-a-uuid", uuid.uuid4()])
def test_find_by_uuid_missing(db, value):
    with pytest.raises(RecordNotFoundError):
        SymptomRepository(db).find_by_uuid(value)


def test_nil_input_rejected(db):
    repo = SymptomRepository(db)
    for op in (repo.create, repo.update, repo.delete):
        with pytest.raises(InvalidInputError):
            op(None)


def test_unique_pair_raises_duplicate(db, user):
    symptom = SymptomRepository(db).create_with_omit(Symptom(name="Pain", scale=5), "uuid")
    db.commit()

    links = SymptomUserRepository(db)
    links.create(SymptomUser(user_id=user.id, symptom_id=symptom.id))
    db.commit()
    with pytest.raises(DuplicateRecordError):
        links.create(SymptomUser(user_id=user.id, symptom_id=symptom.id))

    assert links.find_item_by_ids(user.id, symptom.id, "user_id", "symptom_id") is not None


def test_not_null_violation_is_not_a_duplicate(db):
    with pytest.raises(PersistenceError) as exc:
        SymptomRepository(db).create_with_omit(Symptom(name=None, scale=5), "uuid")
    assert not isinstance(exc.value, DuplicateRecordError)
    assert str(exc.value).startswith("failed to create record with omitted columns: ")


def test_foreign_key_violation_is_not_a_duplicate(db):
    db.execute(text("PRAGMA foreign_keys=ON"))
    try:
        with pytest.raises(PersistenceError) as exc:
            SymptomUserRepository(db).create(SymptomUser(user_id=999, symptom_id=999))
        assert not isinstance(exc.value, DuplicateRecordError)
    finally:
        db.execute(text("PRAGMA foreign_keys=OFF"))
