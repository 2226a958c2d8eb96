"""Import every mapped class so ``Base.metadata`` knows all tables.

Feature models import ``workshophub.models.base``, so they cannot be pulled
in from ``workshophub.models`` itself without an import cycle.
"""

from workshophub.models import AuditLog, Base, User  # noqa: F401
from workshophub.workshops.models import Workshop  # noqa: F401
from workshophub.registrations.models import Registration, RegistrationStatus  # noqa: F401
from workshophub.attendance.models import Attendance  # noqa: F401
from workshophub.feedback.models import Feedback  # noqa: F401
from workshophub.materials.models import Material  # noqa: F401
from workshophub.certificates.models import Certificate  # noqa: F401
