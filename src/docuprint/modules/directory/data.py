"""
Directory Seed Data

Communities served by DocuPrint. Ids are stable slugs; they are stored on
signups, resident profiles and admin accounts.
"""

from typing import Any


def _flats(prefix: str, floors: range, units: range) -> list[str]:
    return [f"{prefix}-{floor}{unit:02d}" for floor in floors for unit in units]


DIRECTORY_DATA: list[dict[str, Any]] = [
    {
        "id": "karnataka",
        "name": "Karnataka",
        "cities": [
            {
                "id": "bengaluru",
                "name": "Bengaluru",
                "communities": [
                    {
                        "id": "prestige-lakeside-habitat",
                        "name": "Prestige Lakeside Habitat",
                        "blocks": [
                            {"id": "plh-a", "name": "Block A", "flats": _flats("A", range(1, 5), range(1, 5))},
                            {"id": "plh-b", "name": "Block B", "flats": _flats("B", range(1, 5), range(1, 5))},
                            {"id": "plh-c", "name": "Block C", "flats": _flats("C", range(1, 4), range(1, 3))},
                        ],
                    },
                    {
                        "id": "brigade-meadows",
                        "name": "Brigade Meadows",
                        "blocks": [
                            {"id": "bm-tulip", "name": "Tulip", "flats": _flats("T", range(1, 6), range(1, 4))},
                            {"id": "bm-orchid", "name": "Orchid", "flats": _flats("O", range(1, 6), range(1, 4))},
                        ],
                    },
                ],
            },
            {
                "id": "mysuru",
                "name": "Mysuru",
                "communities": [
                    {
                        "id": "vijayanagar-greens",
                        "name": "Vijayanagar Greens",
                        "blocks": [
                            {"id": "vg-1", "name": "Tower 1", "flats": _flats("1", range(1, 4), range(1, 3))},
                        ],
                    },
                ],
            },
        ],
    },
    {
        "id": "telangana",
        "name": "Telangana",
        "cities": [
            {
                "id": "hyderabad",
                "name": "Hyderabad",
                "communities": [
                    {
                        "id": "my-home-avatar",
                        "name": "My Home Avatar",
                        "blocks": [
                            {"id": "mha-1", "name": "Tower 1", "flats": _flats("1", range(1, 6), range(1, 5))},
                            {"id": "mha-2", "name": "Tower 2", "flats": _flats("2", range(1, 6), range(1, 5))},
                        ],
                    },
                ],
            },
        ],
    },
    {
        "id": "maharashtra",
        "name": "Maharashtra",
        "cities": [
            {
                "id": "pune",
                "name": "Pune",
                "communities": [
                    {
                        "id": "amanora-park-town",
                        "name": "Amanora Park Town",
                        "blocks": [
                            {"id": "apt-gateway", "name": "Gateway Towers", "flats": _flats("G", range(1, 5), range(1, 4))},
                            {"id": "apt-aspire", "name": "Aspire Towers", "flats": _flats("AS", range(1, 5), range(1, 4))},
                        ],
                    },
                ],
            },
        ],
    },
]
