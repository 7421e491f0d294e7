import random

import pytest
import requests

from meme_generator.state import Template, TemplateCatalog


class FakeResponse:
    """Minimal stand-in for requests.Response as used by the API client."""

    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


@pytest.fixture
def imgflip_payload():
    return {
        "success": True,
        "data": {
            "memes": [
                {"id": "181913649", "name": "Drake Hotline Bling", "url": "https://i.imgflip.com/30b1gx.jpg",
                 "width": 1200, "height": 1200, "box_count": 2},
                {"id": "87743020", "name": "Two Buttons", "url": "https://i.imgflip.com/1g8my4.jpg",
                 "width": 600, "height": 908, "box_count": 3},
                {"id": "112126428", "name": "Distracted Boyfriend", "url": "https://i.imgflip.com/1ur9b0.jpg",
                 "width": 1200, "height": 800, "box_count": 3},
            ]
        }
    }


@pytest.fixture
def two_templates():
    return [Template(url="a.jpg", name="A"), Template(url="b.jpg", name="B")]


@pytest.fixture
def loaded_catalog(two_templates):
    return TemplateCatalog.loaded(two_templates)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fake_response():
    """Factory for FakeResponse objects, for stubbing requests.get."""
    return FakeResponse
