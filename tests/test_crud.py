"""
Tests for the job CRUD layer, run against an in-memory collection.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from app.core.errors import InvalidJobIdError
from app.crud import job as job_crud
from app.models.job import JOB_FIELDS, job_from_document, new_job_document
from app.schemas.job import JobPayload


@pytest.fixture
def payload():
    return JobPayload(title="AWS Engineer", company="On the beach", status="Rejected")


class TestParseJobId:

    def test_valid_id(self):
        object_id = ObjectId()
        assert job_crud.parse_job_id(str(object_id)) == object_id

    @pytest.mark.parametrize("job_id", ["", "abc", "zzzzzzzzzzzzzzzzzzzzzzzz", "0" * 25, None])
    def test_invalid_id(self, job_id):
        with pytest.raises(InvalidJobIdError):
            job_crud.parse_job_id(job_id)


class TestCreate:

    def test_create_assigns_id_and_timestamps(self, collection, payload):
        result = job_crud.create(collection, payload)

        document = collection.find_one({"_id": result.inserted_id})
        assert document["title"] == "AWS Engineer"
        assert document["created_at"] == document["updated_at"]

    def test_create_many(self, collection, payload):
        ids = job_crud.create_many(collection, [payload, payload])

        assert len(ids) == 2
        assert len(set(ids)) == 2
        assert collection.count_documents({}) == 2

    def test_create_many_empty(self, collection):
        assert job_crud.create_many(collection, []) == []


class TestRead:

    def test_get_by_id_missing(self, collection):
        assert job_crud.get_by_id(collection, str(ObjectId())) is None

    def test_get_by_id(self, collection, payload):
        inserted_id = job_crud.create(collection, payload).inserted_id

        job = job_crud.get_by_id(collection, str(inserted_id))

        assert job["id"] == str(inserted_id)
        assert job["company"] == "On the beach"

    def test_get_multi_order_and_limit(self, collection):
        start = datetime(2024, 6, 1, tzinfo=timezone.utc)
        for i in range(4):
            collection.insert_one(new_job_document(f"Job {i}", "Acme", "Applied", now=start + timedelta(minutes=i)))

        jobs = job_crud.get_multi(collection, limit=3)

        assert [job["title"] for job in jobs] == ["Job 3", "Job 2", "Job 1"]

    def test_get_multi_no_limit(self, collection):
        for i in range(4):
            collection.insert_one(new_job_document(f"Job {i}", "Acme", "Applied"))

        assert len(job_crud.get_multi(collection)) == 4


class TestUpdate:

    def test_update_sets_fields_only(self, collection, payload):
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        document = new_job_document("Old", "Old Co", "Applied", now=created_at)
        collection.insert_one(document)

        result = job_crud.update(collection, str(document["_id"]), payload)

        assert result.matched_count == 1
        stored = job_from_document(collection.find_one({"_id": document["_id"]}))
        assert stored["title"] == "AWS Engineer"
        assert stored["status"] == "Rejected"
        assert stored["created_at"] == created_at
        assert stored["updated_at"] > created_at

    def test_update_sets_client_fields_and_timestamp(self, payload):
        collection = MagicMock()

        job_crud.update(collection, str(ObjectId()), payload)

        _, update = collection.update_one.call_args.args
        assert set(update["$set"]) == set(JOB_FIELDS) | {"updated_at"}

    def test_update_missing(self, collection, payload):
        result = job_crud.update(collection, str(ObjectId()), payload)

        assert result.matched_count == 0
        assert result.modified_count == 0

    def test_update_invalid_id(self, collection, payload):
        with pytest.raises(InvalidJobIdError):
            job_crud.update(collection, "bad", payload)


class TestDelete:

    def test_delete(self, collection, payload):
        inserted_id = job_crud.create(collection, payload).inserted_id

        assert job_crud.delete(collection, str(inserted_id)).deleted_count == 1
        assert job_crud.delete(collection, str(inserted_id)).deleted_count == 0


class TestJobFromDocument:

    def test_naive_datetimes_are_utc(self):
        naive = datetime(2024, 1, 1, 12, 0)
        job = job_from_document({
            "_id": ObjectId(),
            "title": "t",
            "company": "c",
            "status": "s",
            "created_at": naive,
            "updated_at": naive,
        })

        assert job["created_at"].tzinfo == timezone.utc

    def test_missing_fields_default_to_empty(self):
        job = job_from_document({"_id": ObjectId()})

        assert job["title"] == ""
        assert job["created_at"] is None
