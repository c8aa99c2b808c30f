"""Runtime mode resolution."""
from __future__ import annotations

from enum import Enum


class RuntimeMode(str, Enum):
    """Operating context that changes startup behaviour."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def resolve(cls, environment: str | None) -> "RuntimeMode":
        """Map a raw environment name onto a runtime mode.

        Only ``production`` (case-insensitive) selects production; every other
        value, including an empty one, runs in development mode.
        """

        if environment and environment.strip().lower() == cls.PRODUCTION.value:
            return cls.PRODUCTION
        return cls.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self is RuntimeMode.PRODUCTION
