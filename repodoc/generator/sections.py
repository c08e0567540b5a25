"""Section renderers for generated README documents.

Each renderer takes the shared :class:`GenerationContext` and returns one
Markdown fragment. Renderers never perform I/O and never raise for a
well-formed descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..models import FileEntry, RepositoryDescriptor
from .constants import (
    ACKNOWLEDGMENTS,
    BADGE_STYLE,
    CALL_TO_ACTION,
    CLONE_STEPS,
    CONTRIBUTING_INTRO,
    CONTRIBUTING_STEPS,
    DESCRIPTION_FALLBACK,
    DOCKER_ENTRY,
    DOCKER_FEATURE,
    GENERAL_FEATURES,
    GENERIC_PREREQUISITE,
    INSTALL_STEPS,
    LANGUAGE_FEATURES,
    LICENSED_TEMPLATE,
    NODE_RUNTIME_ENTRY,
    PREREQUISITES,
    SECTION_TITLES,
    TECH_STACK_EXTENSIONS,
    TECH_STACK_FALLBACK,
    TESTED_FEATURE,
    UNLICENSED_TEXT,
    USAGE_EXAMPLES,
    USAGE_INTRO,
    Ecosystem,
    Language,
)
from .signals import EcosystemSignal


@dataclass(frozen=True)
class GenerationContext:
    """Inputs shared by every section renderer."""

    descriptor: RepositoryDescriptor
    listing: Tuple[FileEntry, ...]
    signal: EcosystemSignal
    language: Language

    @classmethod
    def create(
        cls, descriptor: RepositoryDescriptor, listing: Tuple[FileEntry, ...]
    ) -> "GenerationContext":
        return cls(
            descriptor=descriptor,
            listing=listing,
            signal=EcosystemSignal.from_listing(listing),
            language=Language.from_name(descriptor.language),
        )

    @property
    def slug(self) -> str:
        return f"{self.descriptor.owner.login}/{self.descriptor.name}"


SectionRenderer = Callable[[GenerationContext], str]


def _shield(alt: str, path: str, slug: str) -> str:
    return f"![{alt}](https://img.shields.io/github/{path}/{slug}?style={BADGE_STYLE})"


def render_title(ctx: GenerationContext) -> str:
    return f"# {ctx.descriptor.name}"


def render_badges(ctx: GenerationContext) -> str:
    slug = ctx.slug
    badges = [
        _shield("GitHub stars", "stars", slug),
        _shield("GitHub forks", "forks", slug),
        _shield("GitHub issues", "issues", slug),
    ]
    if ctx.descriptor.language:
        badges.append(_shield("GitHub language", "languages/top", slug))
    if ctx.descriptor.license:
        badges.append(_shield("License", "license", slug))
    badges.append(_shield("GitHub last commit", "last-commit", slug))
    return " ".join(badges)


def render_description(ctx: GenerationContext) -> str:
    return ctx.descriptor.description or DESCRIPTION_FALLBACK


def render_features(ctx: GenerationContext) -> str:
    features = list(GENERAL_FEATURES)
    language_feature = LANGUAGE_FEATURES[ctx.language]
    if language_feature:
        features.append(language_feature)
    if ctx.signal.has_test_files:
        features.append(TESTED_FEATURE)
    if ctx.signal.has_docker:
        features.append(DOCKER_FEATURE)
    bullets = "\n".join(f"- {feature}" for feature in features)
    return f"{SECTION_TITLES['features']}\n\n{bullets}"


def _prerequisites(ctx: GenerationContext) -> str:
    ecosystem = ctx.signal.ecosystem
    if ecosystem is Ecosystem.UNKNOWN:
        runtime = ctx.descriptor.language or "Required runtime"
        return GENERIC_PREREQUISITE.format(runtime=runtime)
    return "\n".join(PREREQUISITES[ecosystem])


def _installation(ctx: GenerationContext) -> str:
    steps: List[str] = list(CLONE_STEPS)
    steps.extend(INSTALL_STEPS[ctx.signal.ecosystem])
    return "\n".join(steps)


def render_getting_started(ctx: GenerationContext) -> str:
    return "\n".join(
        [
            SECTION_TITLES["getting_started"],
            "",
            "### Prerequisites",
            "",
            "Make sure you have the following installed on your system:",
            _prerequisites(ctx),
            "",
            "### Installation",
            "",
            _installation(ctx),
        ]
    )


def render_usage(ctx: GenerationContext) -> str:
    fence, lines = USAGE_EXAMPLES[ctx.language]
    body: List[str] = [USAGE_INTRO, ""]
    if fence is None:
        body.extend(lines)
    else:
        body.append(f"```{fence}")
        body.extend(lines)
        body.append("```")
    return f"{SECTION_TITLES['usage']}\n\n" + "\n".join(body)


def _tech_stack(ctx: GenerationContext) -> List[str]:
    extensions = ctx.signal.extensions
    stack = [entry for group, entry in TECH_STACK_EXTENSIONS if extensions.intersection(group)]
    if ctx.signal.has_package_json:
        stack.append(NODE_RUNTIME_ENTRY)
    if ctx.signal.has_dockerfile:
        stack.append(DOCKER_ENTRY)
    return stack or [TECH_STACK_FALLBACK]


def render_built_with(ctx: GenerationContext) -> str:
    primary = ctx.descriptor.language or "Multiple Languages"
    lines = [f"- **{primary}** - Primary programming language"]
    lines.extend(_tech_stack(ctx))
    return f"{SECTION_TITLES['built_with']}\n\n" + "\n".join(lines)


def render_stats(ctx: GenerationContext) -> str:
    descriptor = ctx.descriptor
    license_name = descriptor.license.name if descriptor.license else "No License"
    lines = [
        f"- ⭐ **{descriptor.stargazers_count}** stars",
        f"- 🍴 **{descriptor.forks_count}** forks",
        f"- 👁️ **{descriptor.watchers_count}** watchers",
        f"- 📝 **{license_name}** license",
    ]
    return f"{SECTION_TITLES['stats']}\n\n" + "\n".join(lines)


def render_contributing(ctx: GenerationContext) -> str:
    steps = "\n".join(CONTRIBUTING_STEPS)
    return f"{SECTION_TITLES['contributing']}\n\n{CONTRIBUTING_INTRO}\n\n{steps}"


def license_paragraph(descriptor: RepositoryDescriptor) -> str:
    if descriptor.license:
        return LICENSED_TEMPLATE.format(name=descriptor.license.name)
    return UNLICENSED_TEXT


def render_license(ctx: GenerationContext) -> str:
    return f"{SECTION_TITLES['license']}\n\n{license_paragraph(ctx.descriptor)}"


def render_author(ctx: GenerationContext) -> str:
    descriptor = ctx.descriptor
    login = descriptor.owner.login
    return "\n".join(
        [
            SECTION_TITLES["author"],
            "",
            f"**{login}**",
            "",
            f"- GitHub: [@{login}](https://github.com/{login})",
            f"- Repository: [{descriptor.name}]({descriptor.html_url})",
        ]
    )


def render_acknowledgments(ctx: GenerationContext) -> str:
    return f"{SECTION_TITLES['acknowledgments']}\n\n" + "\n".join(ACKNOWLEDGMENTS)


def render_footer(ctx: GenerationContext) -> str:
    descriptor = ctx.descriptor
    star_badge = (
        f"[![GitHub stars](https://img.shields.io/github/stars/{ctx.slug}.svg?style=social&label=Star)]"
        f"({descriptor.html_url}/stargazers)"
    )
    return f"---\n\n{CALL_TO_ACTION}\n\n{star_badge}"


# Document skeleton; order is part of the output contract.
SECTION_RENDERERS: Tuple[Tuple[str, SectionRenderer], ...] = (
    ("title", render_title),
    ("badges", render_badges),
    ("description", render_description),
    ("features", render_features),
    ("getting_started", render_getting_started),
    ("usage", render_usage),
    ("built_with", render_built_with),
    ("stats", render_stats),
    ("contributing", render_contributing),
    ("license", render_license),
    ("author", render_author),
    ("acknowledgments", render_acknowledgments),
    ("footer", render_footer),
)


__all__ = ["GenerationContext", "SECTION_RENDERERS", "SectionRenderer", "license_paragraph"]
