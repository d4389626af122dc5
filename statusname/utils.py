from __future__ import annotations

import os

from statusname.exceptions import ArgumentError


class Settings:
    """Process settings, read from the environment once at import."""

    __slots__ = ["strict_names", "debug"]

    def __init__(self, strict_names: bool = False, debug: bool = False):
        self.strict_names = strict_names
        self.debug = debug

    @classmethod
    def from_env(cls, environ=None) -> Settings:
        if environ is None:
            environ = os.environ
        return cls(
            strict_names=environ.get("STATUSNAME_STRICT_NAMES") == "1",
            debug=environ.get("STATUSNAME_DEBUG") == "1",
        )

    def __repr__(self):
        return "<Settings strict_names=%r debug=%r>" % (self.strict_names, self.debug)


settings = Settings.from_env()


def _bad_argument(pos, expected, value):
    return ArgumentError(
        "bad argument #%d (%s expected, got %s)"
        % (pos, expected, type(value).__name__)
    )


def check_string(value, pos=1) -> str:
    """Returns `value` if it is a string, raises `ArgumentError` otherwise."""
    if not isinstance(value, str):
        raise _bad_argument(pos, "string", value)
    return value


def check_integer(value, pos=1) -> int:
    """Returns `value` if it is an integer, raises `ArgumentError` otherwise.

    Booleans are rejected even though they are `int` subclasses.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise _bad_argument(pos, "integer", value)
    return value
