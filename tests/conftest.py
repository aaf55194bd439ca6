"""Pytest configuration and shared record fixtures.

This conftest puts the repository root on `sys.path` so `import people_db...` works when running
`pytest` without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure `import people_db...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def belmondo() -> dict[str, Any]:
    return {
        "id": "jpb",
        "name": "Jean Paul Belmondo",
        "nick": ["Bébel"],
        "alias": ["Le Magnifique"],
        "bName": "Jean Paul Charles Belmondo",
        "bDate": "09.04.1933",
        "roles": [
            {"name": "Michel Poiccard", "nick": ["Laszlo"], "movie": "À bout de souffle"},
            {"name": "Ferdinand Griffon", "nick": ["Pierrot"], "movie": "Pierrot le fou"},
            {"name": "Bob", "nick": ["Saint-Clar"], "movie": "Le Magnifique"},
        ],
        "_private": False,
    }


@pytest.fixture
def people(belmondo: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        belmondo,
        {
            "id": "ad",
            "name": "Alain Delon",
            "nick": [],
            "alias": [],
            "bName": "Alain Fabien Maurice Marcel Delon",
            "bDate": "08.11.1935",
            "roles": [{"name": "Jef Costello", "nick": [], "movie": "Le Samouraï"}],
            "_private": True,
        },
        {
            "id": "cd",
            "name": "Catherine Deneuve",
            "nick": ["La Deneuve"],
            "alias": [],
            "bName": "Catherine Fabienne Dorléac",
            "bDate": "22.10.1943",
            "roles": [],
            "_private": False,
        },
        {
            "id": "ld",
            "name": "Louis de Funès",
            "nick": ["Fufu"],
            "alias": [],
            "bName": "Louis Germain David de Funès de Galarza",
            "bDate": "31.07.1914",
            "roles": [{"name": "Ludovic Cruchot", "nick": [], "movie": "Le Gendarme de Saint-Tropez"}],
            "_private": False,
        },
    ]
