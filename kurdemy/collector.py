"""Gather raw stack options from command-line flags and interactive prompts."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from rich.prompt import Confirm, Prompt

from kurdemy.configs.system import KurdemySettings
from kurdemy.logging import CONSOLE, LOGGER
from kurdemy.options import (
    DEFAULT_PROJECT_NAME,
    Database,
    Frontend,
    Orm,
    PackageManager,
    StackSchema,
    choice_values,
)
from kurdemy.validators.project_name import validate_project_name


@dataclass(frozen=True)
class Question:
    """One prompt in the configuration flow."""
    key: str
    message: str
    default: Any
    # None means a yes/no question
    choices: tuple[str, ...] | None = None
    # Skipped questions resolve to `fallback` without prompting
    when: Callable[[Mapping[str, Any]], bool] | None = None
    fallback: Any = None

    def ask(self) -> Any:
        if self.choices is None:
            return Confirm.ask(self.message, default=self.default, console=CONSOLE)
        return Prompt.ask(self.message, choices=list(self.choices), default=self.default, console=CONSOLE)


def _is_nextjs(answers: Mapping[str, Any]) -> bool:
    return answers.get("frontend") == Frontend.NEXTJS.value


def build_questions(schema: StackSchema, settings: KurdemySettings) -> list[Question]:
    """Return the questions for a schema variant, in the order they are asked."""
    questions = [
        Question(
            key="frontend",
            message="Choose your frontend framework",
            choices=choice_values(Frontend),
            default=Frontend.NEXTJS.value,
        ),
    ]

    if schema == StackSchema.LEGACY:
        questions += [
            Question(
                key="database",
                message="Choose your database",
                choices=choice_values(Database),
                default=Database.POSTGRESQL.value,
            ),
            Question(
                key="orm",
                message="Choose your ORM",
                choices=choice_values(Orm),
                default=Orm.PRISMA.value,
            ),
        ]

    questions += [
        Question(key="trpc", message="Do you want to use tRPC for type-safe APIs?", default=True),
        Question(
            key="auth",
            message="Do you want to include NextAuth.js for authentication?",
            default=True,
            when=_is_nextjs,
            fallback=False,
        ),
        Question(key="tailwind", message="Do you want to use Tailwind CSS?", default=True),
        Question(
            key="package_manager",
            message="Choose your package manager",
            choices=choice_values(PackageManager),
            default=settings.default_package_manager.value,
        ),
    ]
    return questions


def collect_options(
    provided: Mapping[str, Any],
    *,
    schema: StackSchema,
    settings: KurdemySettings,
    interactive: bool = True,
) -> dict[str, Any]:
    """Fill in every option, preferring values given on the command line.

    Provided values are passed through untouched, even malformed ones, so the
    validator can report them.

    Args:
        provided: Options already supplied, None meaning "not given"
        schema: Which option set to collect
        settings: User defaults
        interactive: Prompt for missing options instead of using defaults

    Returns:
        Raw options mapping
    """
    answers: dict[str, Any] = {}

    for question in build_questions(schema, settings):
        value = provided.get(question.key)
        if value is not None:
            answers[question.key] = value
        elif question.when is not None and not question.when(answers):
            answers[question.key] = question.fallback
        elif interactive:
            answers[question.key] = question.ask()
        else:
            answers[question.key] = question.default
        LOGGER.debug("Resolved %s=%r", question.key, answers[question.key])

    return answers


def collect_project_name(name: str | None, *, interactive: bool = True) -> str:
    """Return the project name, prompting until a valid one is entered.

    A name given on the command line is returned as-is for the caller to
    validate.
    """
    if name is not None:
        return name
    if not interactive:
        return DEFAULT_PROJECT_NAME

    while True:
        candidate = Prompt.ask("What is your project name?", default=DEFAULT_PROJECT_NAME, console=CONSOLE)
        result = validate_project_name(candidate)
        if result.valid:
            return candidate
        CONSOLE.print(f"[red]Invalid project name: {result.error}[/red]")
