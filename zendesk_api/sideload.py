"""
Sideloads: related records returned in the same response as a ticket

Each loader names the include key it needs and parses the raw response
body on its own, independently of the primary resource and of the other
loaders attached to the same call.
"""
import logging
from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel, Field

from zendesk_api.models.user import User, Group, Organization

logger = logging.getLogger(__name__)


class SideLoader(ABC):
    """Plug-in attached to a single resource fetch"""

    @abstractmethod
    def key(self) -> str:
        """Value added to the ``include`` query parameter"""
        pass

    @abstractmethod
    def unmarshal(self, body: bytes) -> None:
        """Populate this loader from the raw response body"""
        pass


class _UsersEnvelope(BaseModel):
    users: List[User] = Field(default_factory=list)


class _GroupsEnvelope(BaseModel):
    groups: List[Group] = Field(default_factory=list)


class _OrganizationsEnvelope(BaseModel):
    organizations: List[Organization] = Field(default_factory=list)


class UsersSideLoader(SideLoader):
    """Requester, submitter, assignee and collaborator records"""

    def __init__(self):
        self.users: List[User] = []

    def key(self) -> str:
        return "users"

    def unmarshal(self, body: bytes) -> None:
        self.users = _UsersEnvelope.model_validate_json(body).users
        logger.debug(f"Sideloaded {len(self.users)} users")


class GroupsSideLoader(SideLoader):

    def __init__(self):
        self.groups: List[Group] = []

    def key(self) -> str:
        return "groups"

    def unmarshal(self, body: bytes) -> None:
        self.groups = _GroupsEnvelope.model_validate_json(body).groups
        logger.debug(f"Sideloaded {len(self.groups)} groups")


class OrganizationsSideLoader(SideLoader):

    def __init__(self):
        self.organizations: List[Organization] = []

    def key(self) -> str:
        return "organizations"

    def unmarshal(self, body: bytes) -> None:
        self.organizations = _OrganizationsEnvelope.model_validate_json(body).organizations
        logger.debug(f"Sideloaded {len(self.organizations)} organizations")
