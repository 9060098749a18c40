# bookstore/errors.py


class BookstoreError(Exception):
    """Base class for errors rendered as ``{"message": ...}`` responses.

    ``status_code`` is what the service has always answered with;
    ``strict_status_code`` is used instead when the application runs
    with ``STRICT_STATUS_CODES`` enabled.
    """

    status_code = 500
    strict_status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def status_for(self, strict: bool) -> int:
        return self.strict_status_code if strict else self.status_code


class NotFound(BookstoreError):
    status_code = 404
    strict_status_code = 404


class MissingField(BookstoreError):
    status_code = 404
    strict_status_code = 400


class DuplicateUser(BookstoreError):
    status_code = 404
    strict_status_code = 409


class UnexpectedFailure(BookstoreError):
    status_code = 500
    strict_status_code = 500
