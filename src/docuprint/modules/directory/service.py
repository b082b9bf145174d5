"""
Directory Service

The location hierarchy is loaded once and indexed by id, so lookups never
scan nested lists. Block ids are only unique within their community.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache

from docuprint.core.exceptions import ValidationError
from docuprint.modules.directory.data import DIRECTORY_DATA
from docuprint.modules.directory.models import Block, City, Community, State
from docuprint.modules.directory.schemas import CommunitySummary, LocationNames

logger = logging.getLogger(__name__)


class InvalidLocationError(ValidationError):
    """Location ids do not form a path in the directory."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="INVALID_LOCATION")


@dataclass(frozen=True)
class ResolvedLocation:
    state: State
    city: City
    community: Community
    block: Block
    flat_number: str

    def label(self) -> str:
        """Human readable location, e.g. "A-101, Block A, Prestige Lakeside Habitat, Bengaluru"."""
        return f"{self.flat_number}, {self.block.name}, {self.community.name}, {self.city.name}"


class Directory:
    """Indexed, read-only view of the State/City/Community/Block tree."""

    def __init__(self, states: Sequence[State]):
        self._states = tuple(states)
        self._states_by_id: dict[str, State] = {}
        self._cities_by_id: dict[str, tuple[State, City]] = {}
        self._communities_by_id: dict[str, tuple[State, City, Community]] = {}
        self._blocks_by_id: dict[tuple[str, str], Block] = {}
        self._flats_by_block: dict[tuple[str, str], frozenset[str]] = {}

        for state in self._states:
            self._states_by_id[state.id] = state
            for city in state.cities:
                self._cities_by_id[city.id] = (state, city)
                for community in city.communities:
                    self._communities_by_id[community.id] = (state, city, community)
                    for block in community.blocks:
                        key = (community.id, block.id)
                        self._blocks_by_id[key] = block
                        self._flats_by_block[key] = frozenset(block.flats)

    @classmethod
    def from_data(cls, data: Iterable[dict]) -> "Directory":
        return cls([State.model_validate(item) for item in data])

    def tree(self) -> tuple[State, ...]:
        return self._states

    @property
    def community_ids(self) -> list[str]:
        return list(self._communities_by_id)

    def get_community(self, community_id: str) -> Community | None:
        entry = self._communities_by_id.get(community_id)
        return entry[2] if entry else None

    def resolve_location(
        self,
        state_id: str,
        city_id: str,
        community_id: str,
        block_id: str,
        flat_number: str,
    ) -> ResolvedLocation:
        """
        Check that each id is a child of the previous one.

        Raises:
            InvalidLocationError: On the first id that does not resolve
        """
        state = self._states_by_id.get(state_id)
        if state is None:
            raise InvalidLocationError(f"Unknown state '{state_id}'")

        city_entry = self._cities_by_id.get(city_id)
        if city_entry is None or city_entry[0].id != state.id:
            raise InvalidLocationError(f"City '{city_id}' is not in {state.name}")
        city = city_entry[1]

        community_entry = self._communities_by_id.get(community_id)
        if community_entry is None or community_entry[1].id != city.id:
            raise InvalidLocationError(f"Community '{community_id}' is not in {city.name}")
        community = community_entry[2]

        block = self._blocks_by_id.get((community.id, block_id))
        if block is None:
            raise InvalidLocationError(f"Block '{block_id}' is not in {community.name}")

        if flat_number not in self._flats_by_block[(community.id, block.id)]:
            raise InvalidLocationError(f"Flat '{flat_number}' is not in {block.name}")

        return ResolvedLocation(
            state=state,
            city=city,
            community=community,
            block=block,
            flat_number=flat_number,
        )

    def describe_community(self, community_id: str) -> CommunitySummary:
        """
        Community with the names of its state and city.

        Raises:
            InvalidLocationError: If the community is unknown
        """
        entry = self._communities_by_id.get(community_id)
        if entry is None:
            raise InvalidLocationError(f"Unknown community '{community_id}'")
        state, city, community = entry
        return CommunitySummary(
            id=community.id,
            name=community.name,
            state_id=state.id,
            state_name=state.name,
            city_id=city.id,
            city_name=city.name,
            blocks=list(community.blocks),
        )

    def location_names(
        self,
        state_id: str,
        city_id: str,
        community_id: str,
        block_id: str,
        flat_number: str,
    ) -> LocationNames:
        """Display names for stored location ids; unknown ids fall back to the id itself."""
        state = self._states_by_id.get(state_id)
        city_entry = self._cities_by_id.get(city_id)
        community = self.get_community(community_id)
        block = self._blocks_by_id.get((community_id, block_id))
        return LocationNames(
            state_name=state.name if state else state_id,
            city_name=city_entry[1].name if city_entry else city_id,
            community_name=community.name if community else community_id,
            block_name=block.name if block else block_id,
            flat_number=flat_number,
        )


@lru_cache
def get_directory() -> Directory:
    """The process-wide directory, built on first use."""
    directory = Directory.from_data(DIRECTORY_DATA)
    logger.info(f"Directory loaded: {len(directory.community_ids)} communities")
    return directory
