"""Outbound link shown on a profile page."""

from typing import Optional
from uuid import uuid4

from pydantic import Field

from linkbio.domain.model.common import DomainModel
from linkbio.domain.value import LinkId


class Link(DomainModel):
    """A titled outbound link, displayed in list order."""

    id: LinkId = Field(default_factory=lambda: LinkId(uuid4()))
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    icon: Optional[str] = None
