"""Entity base classes."""

from pydantic import BaseModel, ConfigDict

from learnhub.domain.value import UserId


class DomainModel(BaseModel):
    """Immutable entity; changes produce a new instance via ``model_copy``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class OwnedModel(DomainModel):
    """Entity that belongs to a single user.

    Ownership checks go through ``owner_id`` so callers never need to know
    whether a resource stores its owner as ``author_id`` or ``user_id``.
    """

    @property
    def owner_id(self) -> UserId:
        raise NotImplementedError
