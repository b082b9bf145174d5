"""
Directory Schemas
"""

from docuprint.modules.directory.models import Block
from docuprint.modules.shared.schemas import CamelModel


class CommunitySummary(CamelModel):
    """A community together with where it is."""

    id: str
    name: str
    state_id: str
    state_name: str
    city_id: str
    city_name: str
    blocks: list[Block]


class LocationNames(CamelModel):
    state_name: str
    city_name: str
    community_name: str
    block_name: str
    flat_number: str
