"""Runtime configuration for sourcedocs."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Rendering options.

    Attributes:
        language: Info string on fenced declaration blocks
        placeholder_name: Name used for records without one
        path_prefix: Prefix stripped from debug file paths. None means the
            current working directory at the time of the call.
    """

    language: str = "swift"
    placeholder_name: str = "[NO NAME]"
    path_prefix: str | None = None

    @classmethod
    def from_env(cls) -> Config:
        """Build a config from SOURCEDOCS_* environment variables."""
        return cls(
            language=os.environ.get("SOURCEDOCS_LANGUAGE", cls.language),
            placeholder_name=os.environ.get(
                "SOURCEDOCS_NO_NAME", cls.placeholder_name
            ),
            path_prefix=os.environ.get("SOURCEDOCS_PATH_PREFIX"),
        )

    def resolved_path_prefix(self) -> str:
        if self.path_prefix is not None:
            return self.path_prefix
        return os.getcwd()


DEFAULT_CONFIG = Config()
