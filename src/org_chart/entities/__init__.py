"""
Entities of the org chart and the machinery they share.

    from org_chart.entities import Job

    job = Job.from_json({"id": 1, "title": "Engineer"})
    ok, err = Job.validate_json_for_creation({"title": "Engineer"})
"""

from .schema import FieldSchema, FieldSpec
from .validation import ValidationResult
from .masquerade import resolve_masquerade, masquerade_json
from .base import BaseEntity, Entity
from .department import Department
from .job import Job
from .user import User
from .person import Person
from .person_info import PersonInfo

__all__ = [
    "FieldSchema",
    "FieldSpec",
    "ValidationResult",
    "resolve_masquerade",
    "masquerade_json",
    "BaseEntity",
    "Entity",
    "Department",
    "Job",
    "User",
    "Person",
    "PersonInfo",
]
