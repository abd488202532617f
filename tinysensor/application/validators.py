"""Field validation for submitted User, Device and DbUser records.

Each validator inspects a transfer record and returns every violation it finds as
``(field, code)`` pairs; rules never short-circuit one another. Codes:

* ``empty`` - value missing, empty or whitespace only
* ``size`` - length outside the allowed closed range
* ``duplicate`` - username already taken by another account
* ``pattern`` - password does not meet the strength policy
"""

import re
from typing import Callable, List, NamedTuple, Optional

from tinysensor.domain.schemas.db_user import DbUserBase
from tinysensor.domain.schemas.device import DeviceBase
from tinysensor.domain.schemas.user import UserBase

EMPTY = "empty"
SIZE = "size"
DUPLICATE = "duplicate"
PATTERN = "pattern"

PASSWORD_POLICY = re.compile(r"^(?=.*?[A-Z])(?=.*?[a-z])(?=.*?\d).*$")
PASSWORD_POLICY_MIN_LENGTH = 8


class Violation(NamedTuple):
    field: str
    code: str


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_text(violations: List[Violation], field: str, value: Optional[str], min_len: int, max_len: int) -> None:
    """Reject a required text field that is blank or out of range."""
    if _is_blank(value):
        violations.append(Violation(field, EMPTY))
        return
    if not min_len <= len(value) <= max_len:
        violations.append(Violation(field, SIZE))


def validate_user(dto: UserBase) -> List[Violation]:
    violations: List[Violation] = []
    _check_text(violations, "firstname", dto.firstname, 3, 60)
    _check_text(violations, "lastname", dto.lastname, 3, 50)
    _check_text(violations, "email", dto.email, 6, 256)
    return violations


def validate_device(dto: DeviceBase) -> List[Violation]:
    violations: List[Violation] = []
    _check_text(violations, "model", dto.model, 3, 60)
    _check_text(violations, "mac", dto.mac, 12, 17)
    _check_text(violations, "ip", dto.ip, 7, 39)
    return violations


def validate_db_user(
    dto: DbUserBase,
    username_taken: Callable[[str], bool],
    enforce_password_policy: bool = False,
) -> List[Violation]:
    """Validate an account.

    ``username_taken`` is asked only for non-blank usernames;
    callers updating an account must exclude that account from the lookup.
    """
    violations: List[Violation] = []

    _check_text(violations, "username", dto.username, 3, 32)
    if not _is_blank(dto.username) and username_taken(dto.username):
        violations.append(Violation("username", DUPLICATE))

    _check_text(violations, "password", dto.password, 3, 32)
    if enforce_password_policy and not _is_blank(dto.password):
        if len(dto.password) < PASSWORD_POLICY_MIN_LENGTH or not PASSWORD_POLICY.match(dto.password):
            violations.append(Violation("password", PATTERN))

    return violations
