class UsersApiError(Exception):
    """Base class for every error raised by the users service."""


class UserValidationError(UsersApiError):
    """Raised when a user record breaks a field rule."""


class UserNotFoundError(UsersApiError):
    """Raised when an identifier is absent from storage."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"user not found: {user_id}")
        self.user_id = user_id


class UserAlreadyExistsError(UsersApiError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"user already exists: {user_id}")
        self.user_id = user_id


class UserIdMismatchError(UsersApiError):
    def __init__(self, path_id: str, body_id: str) -> None:
        super().__init__(f"ID in the body ({body_id}) does not match the path ({path_id})")
        self.path_id = path_id
        self.body_id = body_id


class StorageError(UsersApiError):
    """Unexpected storage backend failure."""


class InvalidDatabaseTypeError(UsersApiError):
    def __init__(self, database_type: str) -> None:
        super().__init__(f"invalid database type: {database_type}")
        self.database_type = database_type
