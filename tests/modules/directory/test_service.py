"""
Tests for the community directory.
"""

import pytest

from docuprint.modules.directory import Directory, InvalidLocationError, get_directory


@pytest.fixture
def directory() -> Directory:
    return get_directory()


class TestDirectoryIndex:
    def test_get_directory_is_cached(self):
        assert get_directory() is get_directory()

    def test_tree_nests_states_to_flats(self, directory):
        karnataka = next(state for state in directory.tree() if state.id == "karnataka")
        bengaluru = next(city for city in karnataka.cities if city.id == "bengaluru")
        prestige = next(c for c in bengaluru.communities if c.id == "prestige-lakeside-habitat")

        assert [block.id for block in prestige.blocks] == ["plh-a", "plh-b", "plh-c"]
        assert "A-101" in prestige.blocks[0].flats

    def test_tree_serializes_camel_case(self, directory):
        state = directory.tree()[0].model_dump(by_alias=True)
        assert set(state) == {"id", "name", "cities"}
        assert isinstance(state["cities"][0]["communities"][0]["blocks"][0]["flats"], tuple)


class TestResolveLocation:
    def test_valid_path(self, directory):
        location = directory.resolve_location(
            "karnataka", "bengaluru", "prestige-lakeside-habitat", "plh-a", "A-101"
        )

        assert location.community.name == "Prestige Lakeside Habitat"
        assert location.block.name == "Block A"
        assert location.label() == "A-101, Block A, Prestige Lakeside Habitat, Bengaluru"

    @pytest.mark.parametrize(
        ("path", "fragment"),
        [
            (("goa", "bengaluru", "prestige-lakeside-habitat", "plh-a", "A-101"), "state"),
            (("telangana", "bengaluru", "prestige-lakeside-habitat", "plh-a", "A-101"), "City"),
            (("karnataka", "mysuru", "prestige-lakeside-habitat", "plh-a", "A-101"), "Community"),
            (("karnataka", "bengaluru", "prestige-lakeside-habitat", "bm-tulip", "T-101"), "Block"),
            (("karnataka", "bengaluru", "prestige-lakeside-habitat", "plh-a", "B-101"), "Flat"),
        ],
    )
    def test_each_id_must_be_child_of_previous(self, directory, path, fragment):
        with pytest.raises(InvalidLocationError) as exc_info:
            directory.resolve_location(*path)

        assert fragment in exc_info.value.message
        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == "INVALID_LOCATION"


class TestDescribeCommunity:
    def test_includes_state_and_city_names(self, directory):
        summary = directory.describe_community("my-home-avatar")

        assert summary.state_name == "Telangana"
        assert summary.city_name == "Hyderabad"
        assert [block.id for block in summary.blocks] == ["mha-1", "mha-2"]

    def test_unknown_community(self, directory):
        with pytest.raises(InvalidLocationError):
            directory.describe_community("nowhere")


class TestLocationNames:
    def test_resolves_display_names(self, directory):
        names = directory.location_names(
            "maharashtra", "pune", "amanora-park-town", "apt-gateway", "G-101"
        )

        assert names.state_name == "Maharashtra"
        assert names.community_name == "Amanora Park Town"
        assert names.block_name == "Gateway Towers"
        assert names.flat_number == "G-101"

    def test_unknown_ids_fall_back_to_ids(self, directory):
        names = directory.location_names("x", "y", "z", "b", "1")
        assert (names.state_name, names.city_name, names.community_name) == ("x", "y", "z")
