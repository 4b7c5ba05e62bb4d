"""Application exceptions."""

from typing import Optional


class DuplicateExecutionError(Exception):
    """A guarded call was rejected because an identical call is in flight."""

    def __init__(self, message: str, lock_key: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.lock_key = lock_key

    def __repr__(self) -> str:
        return f"DuplicateExecutionError(message={self.message!r}, lock_key={self.lock_key!r})"


class PersonAlreadyExistsError(Exception):
    """A person with the same email or identity is already stored."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Person already exists: {email}")
        self.email = email
