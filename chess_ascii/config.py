"""Renderer settings, optionally read from the environment."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from chess_ascii.board import Orientation
from chess_ascii.errors import ConfigurationError

LINE_SEPARATOR_ENV = "CHESS_ASCII_LINE_SEPARATOR"
ORIENTATION_ENV = "CHESS_ASCII_ORIENTATION"

LINE_SEPARATORS = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


class RenderSettings(BaseModel):
    """Settings shared by every render call."""

    line_separator: str = "\n"
    orientation: Orientation = Orientation.WHITE

    @field_validator("line_separator", mode="before")
    @classmethod
    def parse_line_separator(cls, value: str) -> str:
        """Accept either a separator name ('lf', 'crlf', 'cr') or the separator itself."""
        if isinstance(value, str) and value.lower() in LINE_SEPARATORS:
            return LINE_SEPARATORS[value.lower()]
        if value not in LINE_SEPARATORS.values():
            raise ValueError(f"Unsupported line separator {value!r}")
        return value

    @field_validator("orientation", mode="before")
    @classmethod
    def parse_orientation(cls, value):
        """Accept an orientation name ('white' or 'black') as well as an Orientation."""
        if isinstance(value, str):
            return Orientation.from_name(value)
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> RenderSettings:
    """
    Load settings from environment variables.

    Unset variables keep their defaults (LF separator, white orientation).

    :param environ: Environment mapping, defaults to os.environ
    :type environ: Optional[Mapping[str, str]]
    :return: Validated settings
    :rtype: RenderSettings
    :raises ConfigurationError: If a variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    values = {}
    if LINE_SEPARATOR_ENV in environ:
        values["line_separator"] = environ[LINE_SEPARATOR_ENV]
    if ORIENTATION_ENV in environ:
        values["orientation"] = environ[ORIENTATION_ENV]

    try:
        return RenderSettings(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid renderer settings: {exc}") from exc
