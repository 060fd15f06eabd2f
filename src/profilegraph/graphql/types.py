"""
Profile models and the argument shapes accepted by each root field
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ProfileInput(BaseModel):
    """Mutation payload: a profile body without its identifier."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    age: int
    home_town: str = Field(alias="homeTown")

    def to_document(self) -> dict[str, Any]:
        """Document content as stored; never includes ``id``."""
        return self.model_dump(by_alias=True, exclude={"id"})


class Profile(ProfileInput):
    """A stored profile; ``id`` is the storage key, not part of the content."""

    id: str

    def to_output(self) -> dict[str, Any]:
        return {"id": self.id, **self.to_document()}


def make_profile(profile_id: str, content: ProfileInput | dict[str, Any]) -> Profile:
    """Combine a storage key with a document body into a Profile.

    A stray ``id`` inside stored content is ignored; the key always wins.
    """
    if isinstance(content, ProfileInput):
        body = content.to_document()
    else:
        body = {key: value for key, value in content.items() if key != "id"}
    return Profile(id=profile_id, **body)


class RootFieldArgs(BaseModel):
    """Base for the closed set of root-field argument variants."""

    model_config = ConfigDict(frozen=True)

    field_name: ClassVar[str]


class GetProfilesArgs(RootFieldArgs):
    field_name: ClassVar[str] = "getProfiles"


class GetProfileArgs(RootFieldArgs):
    field_name: ClassVar[str] = "getProfile"

    id: str


class CreateProfileArgs(RootFieldArgs):
    field_name: ClassVar[str] = "createProfile"

    profile: ProfileInput


class UpdateProfileArgs(RootFieldArgs):
    field_name: ClassVar[str] = "updateProfile"

    id: str
    profile: ProfileInput


ProfileFieldArgs = GetProfilesArgs | GetProfileArgs | CreateProfileArgs | UpdateProfileArgs
