# frontend/meme_generator/state.py
# DESIGNER'S NOTE:
# This file holds the state model of the application: the meme being edited and
# the catalog of templates it can draw images from. Every record is immutable;
# updates return new instances, so each Gradio session can keep its own copy in
# a gr.State without any shared module-level data.

import enum
import random
from dataclasses import dataclass, field, replace
from typing import Optional

DEFAULT_IMAGE_URL = "https://i.imgflip.com/1bij.jpg"
DEFAULT_IMAGE_NAME = "One Does Not Simply"

# Fields of MemeState that the text inputs are allowed to change.
TEXT_FIELDS = ("top_text", "bottom_text")


@dataclass(frozen=True)
class Template:
    """A meme template image as listed by the template service."""
    url: str
    id: str = ""
    name: str = ""
    width: int = 0
    height: int = 0
    box_count: int = 0

    @classmethod
    def from_record(cls, record: dict) -> "Template":
        """Builds a Template from a raw JSON record. Only 'url' is mandatory."""
        if not isinstance(record, dict):
            raise ValueError(f"Template record must be an object, got {type(record).__name__}")
        url = record.get("url")
        if not isinstance(url, str) or not url.strip():
            raise ValueError(f"Template record has no usable url: {record!r}")
        return cls(
            url=url.strip(),
            id=str(record.get("id") or ""),
            name=str(record.get("name") or ""),
            width=_as_int(record.get("width")),
            height=_as_int(record.get("height")),
            box_count=_as_int(record.get("box_count")),
        )


def _as_int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class MemeState:
    top_text: str = ""
    bottom_text: str = ""
    image_url: str = DEFAULT_IMAGE_URL
    image_name: str = DEFAULT_IMAGE_NAME


class LoadStatus(enum.Enum):
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class TemplateCatalog:
    """Templates available for random selection, plus how loading them went."""
    status: LoadStatus = LoadStatus.NOT_LOADED
    templates: tuple = field(default_factory=tuple)
    error: Optional[str] = None

    @classmethod
    def loaded(cls, templates) -> "TemplateCatalog":
        return cls(status=LoadStatus.LOADED, templates=tuple(templates))

    @classmethod
    def failed(cls, message: str) -> "TemplateCatalog":
        return cls(status=LoadStatus.FAILED, error=message)

    @property
    def can_pick(self) -> bool:
        return self.status is LoadStatus.LOADED and len(self.templates) > 0

    def urls(self) -> list[str]:
        return [t.url for t in self.templates]


# --- State transitions ---

def set_text(meme: MemeState, field_name: str, value: str) -> MemeState:
    """Replaces one overlay text, leaving every other field untouched."""
    if field_name not in TEXT_FIELDS:
        raise ValueError(f"Unknown text field '{field_name}', expected one of {TEXT_FIELDS}")
    return replace(meme, **{field_name: "" if value is None else str(value)})


def pick_random_template(catalog: TemplateCatalog, rng=random):
    """Returns a uniformly random template, or None if the catalog has nothing to pick from."""
    if not catalog.can_pick:
        return None
    return rng.choice(catalog.templates)


def with_random_image(meme: MemeState, catalog: TemplateCatalog, rng=random) -> MemeState:
    """
    Swaps the meme image for a random template from the catalog.
    The overlay texts are kept. An unpickable catalog leaves the meme as it is.
    """
    template = pick_random_template(catalog, rng)
    if template is None:
        return meme
    return replace(meme, image_url=template.url, image_name=template.name or "Meme")
