"""Allowed values for every stack option."""

from enum import Enum


class Frontend(str, Enum):
    NEXTJS = "nextjs"
    REACT = "react"


class Database(str, Enum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    SQLSERVER = "sqlserver"


class Orm(str, Enum):
    PRISMA = "prisma"
    DRIZZLE = "drizzle"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class StackSchema(str, Enum):
    """Which generation of the option set a configuration targets.

    ``legacy`` still exposes the database and ORM choices, ``current`` drops them.
    """

    CURRENT = "current"
    LEGACY = "legacy"


BOOLEAN_OPTIONS = ("trpc", "auth", "tailwind")

RESERVED_PROJECT_NAMES = frozenset({
    "node_modules",
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    ".git",
    ".env",
    "src",
    "dist",
    "build",
})

MAX_PROJECT_NAME_LENGTH = 214

DEFAULT_PROJECT_NAME = "my-kurdemy-app"


def choice_values(enum_cls: type[Enum]) -> tuple[str, ...]:
    """Return the raw string values of an option enum, in declaration order."""
    return tuple(member.value for member in enum_cls)
