"""Shared helpers for CLI commands."""

import functools

from collections.abc import Callable
from typing import Any, TypeVar

import click

from ridingtally.common.logging import get_logger
from ridingtally.domain.exceptions import RidingTallyError
from ridingtally.domain.value_objects.party import Party


F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


def with_error_handling(func: F) -> F:
    """Turn expected failures into click errors.

    ``RidingTallyError`` exits with status 1, ``ValueError`` is reported as a
    usage error (status 2). Messages go to stderr; stdout stays empty.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RidingTallyError as e:
            logger.error("command failed", error=e.message, **e.details)
            raise click.ClickException(e.message) from e
        except ValueError as e:
            raise click.UsageError(str(e)) from e

    return wrapper  # type: ignore[return-value]


class PartyParamType(click.ParamType):
    """Click parameter accepting a party code or any known party label."""

    name = "party"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Party:
        if isinstance(value, Party):
            return value
        party = Party.parse(str(value))
        if party is None:
            self.fail(f"unknown party {value!r}", param, ctx)
        return party


PARTY = PartyParamType()
