"""Shared base for comment service records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for comments, settings, reactions, reports and notifications.

    Records are frozen; services derive changed copies with ``model_copy``
    and hand them to a repository.
    """

    model_config = ConfigDict(frozen=True)
