"""Link use cases."""

from .add_link import AddLinkRequest, AddLinkUseCase
from .remove_link import RemoveLinkRequest, RemoveLinkUseCase
from .replace_links import LinkInput, ReplaceLinksRequest, ReplaceLinksUseCase

__all__ = [
    "AddLinkRequest",
    "AddLinkUseCase",
    "LinkInput",
    "RemoveLinkRequest",
    "RemoveLinkUseCase",
    "ReplaceLinksRequest",
    "ReplaceLinksUseCase",
]
