"""
Root-field resolver registry
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ...ids import IdGenerator
from ...store import DocumentStore
from ..types import RootFieldArgs


@dataclass(frozen=True)
class ResolverContext:
    """Per-request collaborators handed to every resolver."""

    store: DocumentStore
    id_generator: IdGenerator


@dataclass(frozen=True)
class RootField:
    """Binds a root field to its argument shape and resolver function."""

    args_model: type[RootFieldArgs]
    resolve: Callable[[ResolverContext, Any], Awaitable[Any]]

    def parse_args(self, raw_args: dict[str, Any]) -> RootFieldArgs:
        return self.args_model.model_validate(raw_args)


ResolverSet = Mapping[str, RootField]


def build_profile_resolvers() -> dict[str, RootField]:
    """The resolver set for the profile schema, keyed by root field name."""
    from ..types import CreateProfileArgs, GetProfileArgs, GetProfilesArgs, UpdateProfileArgs
    from .profile import create_profile, resolve_profile, resolve_profiles, update_profile

    fields = [
        RootField(GetProfilesArgs, resolve_profiles),
        RootField(GetProfileArgs, resolve_profile),
        RootField(CreateProfileArgs, create_profile),
        RootField(UpdateProfileArgs, update_profile),
    ]
    return {field.args_model.field_name: field for field in fields}


__all__ = ["ResolverContext", "ResolverSet", "RootField", "build_profile_resolvers"]
