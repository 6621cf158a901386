"""
Listing Models
==============
Pydantic models for account and container listing entries.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ContainerInfo(BaseModel):
    """A container entry from an account listing."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    count: int = 0
    size: int = Field(0, alias="bytes")


class ObjectInfo(BaseModel):
    """An object entry from a container listing."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    hash: Optional[str] = None
    size: int = Field(0, alias="bytes")
    content_type: Optional[str] = None
    last_modified: Optional[str] = None
