"""
Directory Models

Static location hierarchy: State -> City -> Community -> Block -> Flat.
Entities are immutable once loaded.
"""

from pydantic import ConfigDict

from docuprint.modules.shared.schemas import CamelModel


class DirectoryEntity(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Block(DirectoryEntity):
    """A tower or wing inside a community; owns its flat labels."""

    flats: tuple[str, ...]


class Community(DirectoryEntity):
    """A gated community with an ordered sequence of blocks."""

    blocks: tuple[Block, ...]


class City(DirectoryEntity):
    communities: tuple[Community, ...]


class State(DirectoryEntity):
    cities: tuple[City, ...]
