"""ORM Models — SQLAlchemy declarative models for the three collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - Reference sets (enrolled/assigned courses, enrolled students) are viewonly
      relationships; only the coordinator writes the underlying rows

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from school_admin.models.student import Student  # noqa: F401
from school_admin.models.teacher import Teacher  # noqa: F401
from school_admin.models.course import Course  # noqa: F401
from school_admin.models.enrollment import Enrollment  # noqa: F401
