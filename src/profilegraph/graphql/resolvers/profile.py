"""
Profile root-field resolvers
"""

from __future__ import annotations

from ...logging import get_logger
from ...store import DocumentNotFound
from ..errors import ProfileNotFoundError
from ..types import (
    CreateProfileArgs,
    GetProfileArgs,
    GetProfilesArgs,
    Profile,
    UpdateProfileArgs,
    make_profile,
)
from . import ResolverContext

logger = get_logger(__name__)


async def resolve_profiles(ctx: ResolverContext, args: GetProfilesArgs) -> list[Profile]:
    """Every stored profile, with ``id`` taken from the storage key."""
    documents = await ctx.store.list_all()
    return [make_profile(document.id, document.content) for document in documents]


async def resolve_profile(ctx: ResolverContext, args: GetProfileArgs) -> Profile:
    try:
        content = await ctx.store.get(args.id)
    except DocumentNotFound:
        raise ProfileNotFoundError(args.id) from None
    return make_profile(args.id, content)


async def create_profile(ctx: ResolverContext, args: CreateProfileArgs) -> Profile:
    """Store the input under a freshly generated id.

    No collision check is made; the generator is trusted to be unique.
    """
    profile_id = ctx.id_generator.next()
    await ctx.store.set(profile_id, args.profile.to_document())
    logger.info("Profile created", profile_id=profile_id)
    return make_profile(profile_id, args.profile)


async def update_profile(ctx: ResolverContext, args: UpdateProfileArgs) -> Profile:
    """Replace the whole document at ``id``.

    Behaves as an upsert: an unknown id is written rather than rejected.
    """
    await ctx.store.set(args.id, args.profile.to_document())
    logger.info("Profile updated", profile_id=args.id)
    return make_profile(args.id, args.profile)
