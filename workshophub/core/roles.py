import enum


class Role(str, enum.Enum):
    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    PARTICIPANT = "participant"


# Route guard tables: the role set each group of routes accepts.
ADMIN_ONLY = frozenset({Role.ADMIN})
INSTRUCTOR_ONLY = frozenset({Role.INSTRUCTOR})
PARTICIPANT_ONLY = frozenset({Role.PARTICIPANT})
STAFF = frozenset({Role.ADMIN, Role.INSTRUCTOR})
