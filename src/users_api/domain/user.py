from __future__ import annotations

import re

from users_api.domain.base import IDomain
from users_api.domain.errors import UserValidationError

# Lowercase letters and digits only, 3 to 32 characters.
USER_ID_PATTERN = re.compile(r"^[a-z0-9]{3,32}$")


class User(IDomain):
    def __init__(self, id: str = "", name: str = "", age: int = 0) -> None:
        self.id = id
        self.name = name
        self.age = age

    def validate(self) -> None:
        if not USER_ID_PATTERN.fullmatch(self.id):
            raise UserValidationError(f"invalid user ID: {self.id}")
        # name and age are not constrained yet
