from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    pass


class ValidationError(AppError):
    pass


class FetchFailedError(AppError):
    """The backing store could not serve a list query.

    ``detail`` is safe to return to clients; the driver error is only
    chained as ``__cause__`` for logs.
    """
