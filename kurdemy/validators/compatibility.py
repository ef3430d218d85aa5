"""Rules spanning more than one option."""

from collections.abc import Mapping
from typing import Any

from kurdemy.options import Database, Frontend, Orm, StackSchema, choice_values

from .base import BaseValidator

AUTH_REQUIRES_NEXTJS = "NextAuth.js requires Next.js as the frontend framework."
DRIZZLE_SQLSERVER_UNSUPPORTED = "Drizzle ORM does not fully support SQL Server yet. Please use Prisma."


def _raw(value: Any) -> Any:
    return getattr(value, "value", value)


class CompatibilityValidator(BaseValidator):
    """Enforces relationships between options that are individually valid."""

    def __init__(self, *, schema: StackSchema = StackSchema.CURRENT) -> None:
        super().__init__("compatibility")
        self.schema = schema

    def collect_errors(self, config: Mapping[str, Any]) -> list[str]:
        errors = []

        # The auth pages rely on the Next.js routing convention. An unknown
        # frontend is already reported by the field checks.
        frontend = _raw(config.get("frontend"))
        if (
            config.get("auth") is True
            and frontend in choice_values(Frontend)
            and frontend != Frontend.NEXTJS.value
        ):
            errors.append(AUTH_REQUIRES_NEXTJS)

        if self.schema == StackSchema.LEGACY:
            if (
                _raw(config.get("orm")) == Orm.DRIZZLE.value
                and _raw(config.get("database")) == Database.SQLSERVER.value
            ):
                errors.append(DRIZZLE_SQLSERVER_UNSUPPORTED)

        return errors
