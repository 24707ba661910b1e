from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from org_chart.entities import Entity, FieldSchema, FieldSpec, Job, Person, PersonInfo, User
from org_chart.exceptions import UnknownFieldError
from org_chart import models


class TestSchemaFromModels:
    """
    Field schemas are derived from the SQLAlchemy models once per entity type.
    """

    def test_job_schema(self):
        schema = Job.__schema__

        assert schema.table_name == "job"
        assert schema.names == ("id", "title")
        assert schema.primary_key.name == "id"
        assert schema.field("title").max_length == 50
        assert [f.name for f in schema.required_for_creation] == ["title"]

    def test_person_schema_types_and_required(self):
        schema = Person.__schema__

        assert schema.field("hire_date").type is date
        assert schema.field("manager_id").nullable
        assert [f.name for f in schema.required_for_creation] == [
            "job_id", "department_id", "first_name", "last_name", "hire_date",
        ]

    def test_user_password_length(self):
        assert User.__schema__.field("password").max_length == 255

    def test_class_attribute_exposes_field_spec(self):
        assert isinstance(Job.title, FieldSpec)
        assert Job.title.name == "title"

    def test_declared_aliases(self):
        aliases = PersonInfo.__schema__.aliases()

        assert aliases[:4] == ["jobId", "job_id", "departmentId", "department_id"]
        assert "id" not in aliases


class TestSchemaInvariants:
    def test_field_specs_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            Job.__schema__.field("title").nullable = True

    def test_unknown_field(self):
        with pytest.raises(UnknownFieldError) as excinfo:
            Job.__schema__.field("salary")

        assert excinfo.value.error_code == "unknown_field"
        assert "salary" not in Job.__schema__

    def test_exactly_one_primary_key(self):
        with pytest.raises(ValueError, match="exactly one primary key"):
            FieldSchema("broken", (FieldSpec("a", int), FieldSpec("b", str)))

    def test_column_clash_rejected(self):
        # A method named like a column would hide the field accessor
        with pytest.raises(TypeError, match="clashes"):

            class BrokenJob(Entity, model=models.Job):
                def title(self):
                    return "x"
