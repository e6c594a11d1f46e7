"""
Related resources that can be sideloaded next to a ticket
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class User(BaseModel):
    """Zendesk user model"""
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    organization_id: Optional[int] = None
    active: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Group(BaseModel):
    """Zendesk agent group model"""
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    default: Optional[bool] = None
    deleted: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Organization(BaseModel):
    """Zendesk organization model"""
    id: int
    name: Optional[str] = None
    domain_names: List[str] = Field(default_factory=list)
    details: Optional[str] = None
    group_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
