import pytest

from org_chart.entities import PersonInfo


class TestPersonInfoFromRow:
    """
    PersonInfo is read from the joined person/job/department/manager row.

    Fixtures used:
      - person_info_rows: rows in person_info column order, keyed by person id.
      - seeded_org: ids of the seeded chart.
    """

    def test_report_has_manager_name(self, person_info_rows, seeded_org):
        """
        Behavior:
          - The report's row carries the manager's full name and the job title.

        Importance:
          - The org chart renders these composed fields directly.
        """
        # Act
        info = PersonInfo.from_row(person_info_rows[seeded_org["report"]])

        # Assert
        assert info.manager_id == seeded_org["boss"]
        assert info.manager_full_name == "Ada Lovelace"
        assert info.job_title == "Engineer"
        assert info.department_name == "Engineering"
        assert info.to_json()["hire_date"] == "2020-01-15"

    def test_top_of_chart_emits_explicit_nulls(self, person_info_rows, seeded_org):
        """
        Behavior:
          - The boss has no manager; to_json() still carries manager_id and
            manager_full_name, as null.

        Importance:
          - Clients get the same keys for every person.
        """
        # Act
        data = PersonInfo.from_row(person_info_rows[seeded_org["boss"]]).to_json()

        # Assert
        assert data["manager_id"] is None
        assert data["manager_full_name"] is None
        assert list(data) == list(PersonInfo.__schema__.names)

    def test_masqueraded_json_uses_declared_aliases(self, person_info_rows, seeded_org):
        info = PersonInfo.from_row(person_info_rows[seeded_org["report"]])

        data = info.to_masqueraded_json()

        assert data["id"] == seeded_org["report"]
        assert data["jobTitle"] == "Engineer"
        assert data["managerFullName"] == "Ada Lovelace"
        assert data["hireDate"] == "2020-01-15"
        assert "job_title" not in data


class TestPersonInfoIsReadOnly:
    def test_assignment_raises(self, person_info_rows, seeded_org):
        info = PersonInfo.from_row(person_info_rows[seeded_org["boss"]])

        with pytest.raises(AttributeError):
            info.first_name = "Someone"

        assert info.first_name == "Ada"

    def test_has_no_json_construction_or_validation(self):
        assert not hasattr(PersonInfo, "from_json")
        assert not hasattr(PersonInfo, "update_by_json")
        assert not hasattr(PersonInfo, "validate_json_for_creation")

    def test_empty_view_emits_all_nulls(self):
        data = PersonInfo().to_json()

        assert set(data) == set(PersonInfo.__schema__.names)
        assert all(v is None for v in data.values())
