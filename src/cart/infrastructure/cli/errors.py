"""Turns mapped error responses into click failures."""

from __future__ import annotations

from http import HTTPStatus

import click

from cart.infrastructure.error_mapping import ErrorResponse, to_error_response


class CommandError(click.ClickException):
    """A failed command. Exit code 4 for client errors, 5 for server errors."""

    def __init__(self, response: ErrorResponse) -> None:
        super().__init__(response.message)
        self.status = response.status
        self.exit_code = (
            5 if response.status >= HTTPStatus.INTERNAL_SERVER_ERROR else 4
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> CommandError:
        return cls(to_error_response(exc))
