"""State transitions of the meme and the template catalog."""

import pytest

from meme_generator.state import (
    DEFAULT_IMAGE_URL,
    LoadStatus,
    MemeState,
    Template,
    TemplateCatalog,
    pick_random_template,
    set_text,
    with_random_image,
)


# ── Text fields ──────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value",
    ["", "LOL", "  padded  ", "ünïcödé 🤡", "<b>not html</b>", "line\nbreak", "x" * 500],
    ids=repr,
)
@pytest.mark.parametrize("field_name", ["top_text", "bottom_text"])
def test_set_text_reads_back(field_name, value):
    meme = set_text(MemeState(), field_name, value)
    assert getattr(meme, field_name) == value


def test_set_text_leaves_other_fields_alone():
    meme = MemeState(top_text="top", bottom_text="bottom", image_url="x.jpg", image_name="X")

    updated = set_text(meme, "top_text", "new top")
    assert updated == MemeState(top_text="new top", bottom_text="bottom", image_url="x.jpg", image_name="X")

    updated = set_text(meme, "bottom_text", "new bottom")
    assert updated == MemeState(top_text="top", bottom_text="new bottom", image_url="x.jpg", image_name="X")


def test_set_text_does_not_mutate_original():
    meme = MemeState()
    set_text(meme, "top_text", "changed")
    assert meme.top_text == ""


def test_set_text_none_becomes_empty():
    assert set_text(MemeState(top_text="x"), "top_text", None).top_text == ""


def test_set_text_rejects_unknown_field():
    with pytest.raises(ValueError):
        set_text(MemeState(), "image_url", "evil.jpg")


# ── Catalog ──────────────────────────────────────────────────────────

def test_new_catalog_is_not_loaded():
    catalog = TemplateCatalog()
    assert catalog.status is LoadStatus.NOT_LOADED
    assert catalog.templates == ()
    assert not catalog.can_pick


def test_failed_catalog_keeps_message():
    catalog = TemplateCatalog.failed("boom")
    assert catalog.status is LoadStatus.FAILED
    assert catalog.error == "boom"
    assert not catalog.can_pick


def test_loaded_empty_catalog_cannot_pick():
    catalog = TemplateCatalog.loaded([])
    assert catalog.status is LoadStatus.LOADED
    assert not catalog.can_pick


def test_template_from_record_requires_url():
    with pytest.raises(ValueError):
        Template.from_record({"id": "1", "name": "no url"})
    with pytest.raises(ValueError):
        Template.from_record({"url": "   "})
    with pytest.raises(ValueError):
        Template.from_record("https://i.imgflip.com/1bij.jpg")


def test_template_from_record_tolerates_odd_numbers():
    template = Template.from_record({"url": "a.jpg", "width": "600", "height": None, "box_count": "many"})
    assert template == Template(url="a.jpg", width=600)


# ── Random image ─────────────────────────────────────────────────────

def test_random_image_is_always_from_catalog(loaded_catalog, rng):
    meme = MemeState(top_text="top", bottom_text="bottom")
    seen = set()
    for _ in range(200):
        meme = with_random_image(meme, loaded_catalog, rng)
        assert meme.image_url in {"a.jpg", "b.jpg"}
        assert (meme.top_text, meme.bottom_text) == ("top", "bottom")
        seen.add(meme.image_url)
    assert seen == {"a.jpg", "b.jpg"}


def test_random_image_with_single_template_is_idempotent(rng):
    catalog = TemplateCatalog.loaded([Template(url="only.jpg", name="Only")])
    meme = MemeState()
    for _ in range(10):
        meme = with_random_image(meme, catalog, rng)
        assert meme.image_url == "only.jpg"
        assert meme.image_name == "Only"


@pytest.mark.parametrize(
    "catalog",
    [TemplateCatalog(), TemplateCatalog.failed("offline"), TemplateCatalog.loaded([])],
    ids=["not_loaded", "failed", "empty"],
)
def test_random_image_without_templates_keeps_meme(catalog, rng):
    meme = MemeState(top_text="keep", bottom_text="me")
    assert pick_random_template(catalog, rng) is None
    assert with_random_image(meme, catalog, rng) is meme
    assert meme.image_url == DEFAULT_IMAGE_URL


def test_unnamed_template_gets_generic_alt(rng):
    catalog = TemplateCatalog.loaded([Template(url="anon.jpg")])
    assert with_random_image(MemeState(), catalog, rng).image_name == "Meme"
