"""Shared fixtures for the RoadFacets test suite."""

import json

import pytest

from roadfacets_core.dataset import Dataset
from roadfacets_core.facets.ordering import OrderingSpec
from roadfacets_core.storage.memory import MemorySource


PAPERS = [
    {
        "document_label": "Zhang2021",
        "year": 2021,
        "title": "Morphological Boxes for Design Space Exploration",
        "institution": "TU Munich",
        "url": "https://example.org/papers/zhang-2021-morphological-boxes-for-design-space-exploration.pdf",
        "topic": "nlp, vision",
        "method": ["survey", "taxonomy"],
        "venue": "Journal",
    },
    {
        "document_label": "alvarez2019",
        "year": "2019",
        "title": "Robot Grasping Taxonomies",
        "institution": "MIT",
        "url": "https://example.org/alvarez",
        "topic": "robotics",
        "method": "experiment",
        "venue": "Conference",
    },
    {
        "document_label": "Baker2020",
        "year": 2020,
        "title": "Vision Transformers in the Wild",
        "institution": "ETH",
        "topic": ["vision"],
        "method": "experiment, survey",
        "venue": "Conference",
    },
]

ORDERING = {
    "keysOrder": ["topic", "method"],
    "groups": [
        {"name": "Content", "keys": ["topic"]},
        {"name": "Approach", "keys": ["method", "venue"]},
    ],
    "buttonsOrder": {"topic": ["vision", "nlp", "robotics"]},
}


@pytest.fixture
def papers():
    """Plain-dict records."""
    return [dict(p) for p in PAPERS]


@pytest.fixture
def dataset():
    """Dataset built from the sample papers."""
    return Dataset.from_list(PAPERS, source="test")


@pytest.fixture
def ordering():
    return OrderingSpec.from_dict(ORDERING)


@pytest.fixture
def source():
    """Memory source holding data.json and ordering.json."""
    src = MemorySource()
    src.write_json("data.json", PAPERS)
    src.write_json("ordering.json", ORDERING)
    return src


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding data.json only."""
    (tmp_path / "data.json").write_text(json.dumps(PAPERS), encoding="utf-8")
    return tmp_path
