"""Non-blocking advice for configurations that already passed validation."""

from typing import TYPE_CHECKING

from kurdemy.options import Frontend, PackageManager

from .base import StackCompatibilityResult

if TYPE_CHECKING:
    from kurdemy.configs.project import StackConfig


def get_recommendations(config: "StackConfig") -> list[str]:
    """Suggest improvements to a valid configuration.

    Only a ``StackConfig`` is accepted, and one cannot be built from an
    invalid configuration.

    Args:
        config: A validated stack configuration

    Returns:
        Recommendations in a stable order
    """
    recommendations = []
    is_next = config.frontend == Frontend.NEXTJS

    if config.frontend == Frontend.REACT and not config.trpc:
        recommendations.append("Consider using tRPC for better type safety between frontend and backend.")

    if not config.tailwind:
        recommendations.append("Tailwind CSS can significantly speed up your styling workflow.")

    if is_next and not config.auth:
        recommendations.append("NextAuth.js provides easy authentication setup for Next.js applications.")

    if config.package_manager == PackageManager.NPM:
        recommendations.append("Consider using pnpm or yarn for faster installs and better dependency management.")

    if is_next and config.trpc:
        recommendations.append("Next.js with tRPC provides excellent full-stack type safety.")

    if is_next and config.tailwind:
        recommendations.append("Tailwind CSS integrates seamlessly with Next.js for rapid UI development.")

    return recommendations


def validate_stack_compatibility(config: "StackConfig") -> StackCompatibilityResult:
    """Collect warnings about option pairings that work but could be better."""
    warnings = []

    if config.auth and not config.trpc and config.frontend == Frontend.NEXTJS:
        warnings.append("Using NextAuth.js with tRPC provides better type safety for authentication.")

    if config.trpc and config.frontend == Frontend.REACT:
        warnings.append("tRPC works great with React, but consider the additional setup complexity.")

    # Every accepted combination generates a working project
    return StackCompatibilityResult(compatible=True, warnings=warnings)
