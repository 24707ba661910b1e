from datetime import date

import pytest
from sqlalchemy import select

from org_chart.entities import Person
from org_chart.exceptions import PayloadShapeError, RowShapeError
from org_chart.models import Person as PersonModel


class TestPersonFromJson:
    """
    Person carries foreign keys, a nullable manager and a date.
    """

    def test_hire_date_is_parsed_and_emitted_as_iso(self, sample_person_payload: dict):
        """
        Behavior:
          - "hire_date" arrives as an ISO string, is held as a date, and is
            emitted as the same ISO string.

        Importance:
          - Dates are the only non-scalar JSON type the layer exchanges.
        """
        # Act
        person = Person.from_json(sample_person_payload)

        # Assert
        assert isinstance(person.hire_date, date)
        assert person.to_json()["hire_date"] == sample_person_payload["hire_date"]

    def test_null_manager_stays_absent(self, sample_person_payload: dict):
        person = Person.from_json(sample_person_payload)

        assert person.manager_id is None
        assert "manager_id" not in person.to_json()

    def test_malformed_date_rejected(self, sample_person_payload: dict):
        payload = {**sample_person_payload, "hire_date": "15/01/2020"}

        with pytest.raises(PayloadShapeError, match="Type error in the hire_date field"):
            Person.from_json(payload)

    def test_full_name(self):
        person = Person.from_json({"first_name": "Grace", "last_name": "Hopper"})

        assert person.full_name == "Grace Hopper"


class TestPersonValidation:
    def test_complete_payload_passes(self, sample_person_payload: dict):
        assert Person.validate_json_for_creation(sample_person_payload)

    def test_manager_is_optional(self, sample_person_payload: dict):
        payload = dict(sample_person_payload)
        del payload["manager_id"]

        assert Person.validate_json_for_creation(payload)

    def test_first_missing_column_in_schema_order(self, sample_person_payload: dict):
        payload = {k: v for k, v in sample_person_payload.items() if k not in ("job_id", "last_name")}

        ok, err = Person.validate_json_for_creation(payload)

        assert not ok
        assert err == "The job_id column cannot be null"


class TestPersonUpdate:
    def test_merge_is_atomic(self, sample_person_payload: dict):
        """
        Behavior:
          - A payload with one good and one bad value raises and changes nothing.

        Importance:
          - A failed request must not leave a half-updated entity behind.
        """
        # Arrange
        person = Person.from_json({"id": 1, **sample_person_payload})
        before = person.to_json()

        # Act
        with pytest.raises(PayloadShapeError):
            person.update_by_json({"first_name": "Changed", "job_id": "three"})

        # Assert
        assert person.to_json() == before

    def test_null_for_required_column_aborts_whole_merge(self, sample_person_payload: dict):
        person = Person.from_json({"id": 1, **sample_person_payload})
        before = person.to_json()

        with pytest.raises(PayloadShapeError, match="The last_name column cannot be null"):
            person.update_by_json({"first_name": "Changed", "last_name": None})

        assert person.to_json() == before

    def test_clearing_manager_produces_null_update_param(self, db_conn, seeded_org):
        row = db_conn.execute(
            select(PersonModel.__table__).where(PersonModel.id == seeded_org["report"])
        ).one()
        person = Person.from_row(row)
        assert person.manager_id == seeded_org["boss"]

        person.update_by_json({"manager_id": None})

        assert person.manager_id is None
        assert person.update_params() == {"manager_id": None}


class TestPersonFromRow:
    def test_null_column_leaves_field_absent(self, db_conn, seeded_org):
        row = db_conn.execute(
            select(PersonModel.__table__).where(PersonModel.id == seeded_org["boss"])
        ).one()

        person = Person.from_row(row)

        assert person.first_name == "Ada"
        assert person.hire_date == date(2015, 3, 1)
        assert not person.is_present("manager_id")
        assert person.value_of("manager_id") == 0

    def test_short_row_raises(self):
        with pytest.raises(RowShapeError) as excinfo:
            Person.from_row((1, 2, 3))

        assert excinfo.value.http_status() == 500

    def test_mapping_row_with_iso_date_string(self):
        # Some drivers hand dates back as text
        person = Person.from_row(
            {"id": 4, "job_id": 1, "department_id": 1, "first_name": "Linus",
             "last_name": "Torvalds", "hire_date": "2019-06-30"}
        )

        assert person.hire_date == date(2019, 6, 30)
        assert not person.is_present("manager_id")
