r"""
Centralized access to the relational model of the org chart.

    from org_chart.models import Department, Job, Person, PersonInfo, User

The table classes are the single declaration of column order, types,
nullability and defaults; `org_chart.entities` derives its field schemas from them.
"""

from .department import Department
from .job import Job
from .user import User
from .person import Person
from .person_info import PersonInfo

__all__ = [
    "Department",
    "Job",
    "User",
    "Person",
    "PersonInfo",
]
