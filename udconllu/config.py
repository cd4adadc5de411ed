"""Command-line configuration.

Options may be stored in a YAML file, e.g.:

    strict: true
    keep_comments: false
    log_level: DEBUG

Flags given on the command line override values read from the file."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Optional

import yaml

from . import defaults


class Error(Exception):
    pass


@dataclasses.dataclass
class Config:
    """Options shared by the command-line tools.

    Args:
        strict: if true, stops at the first malformed sentence.
        keep_comments: if false, comment lines are not written out.
        log_level: name of a logging level.
        output: path for output; stdout if None.
    """

    strict: bool = defaults.STRICT
    keep_comments: bool = defaults.KEEP_COMMENTS
    log_level: str = defaults.LOG_LEVEL
    output: Optional[str] = defaults.OUTPUT

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> Config:
        names = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(options) - names)
        if unknown:
            raise Error(f"Unknown configuration option(s): {unknown}")
        return cls(**options)

    @classmethod
    def read(cls, path: str) -> Config:
        """Loads configuration from a YAML file.

        An empty file yields the defaults.

        Args:
            path (str).

        Returns:
            Config.

        Raises:
            Error: if the file is not a mapping or has unknown keys.
        """
        with open(path, "r") as source:
            options = yaml.safe_load(source)
        if options is None:
            return cls()
        if not isinstance(options, dict):
            raise Error(f"Expected a mapping in {path}")
        return cls.from_dict(options)

    def update(self, **overrides) -> Config:
        """Returns a copy with the non-None overrides applied."""
        return dataclasses.replace(
            self, **{k: v for k, v in overrides.items() if v is not None}
        )
