# frontend/meme_generator/handlers.py
# DESIGNER'S NOTE:
# This file is the "controller" layer. Each function is a Gradio callback that
# receives the session state, applies a state transition from state.py and
# returns the new state together with the UI updates it implies.

import logging
import random

import gradio as gr
import requests

from . import api_client
from . import state
from . import ui

logger = logging.getLogger(__name__)


def _catalog_updates(catalog):
    """Status line, new-image button and reload button updates for a catalog."""
    return (
        ui.render_status(catalog),
        gr.update(interactive=catalog.can_pick),
        gr.update(visible=not catalog.can_pick),
    )


# --- Gradio Callback Handlers ---

def load_templates():
    """Callback run on page load (and on reload): fetches the template list for this session."""
    try:
        templates = api_client.get_meme_templates()
        catalog = state.TemplateCatalog.loaded(templates)
        if not catalog.can_pick:
            gr.Warning("No meme templates are available right now.")
    except (requests.RequestException, api_client.TemplateFetchError) as e:
        logger.warning(f"Loading meme templates failed: {e}")
        catalog = state.TemplateCatalog.failed(str(e))
        gr.Warning(f"Could not load meme templates: {e}")
    return (catalog,) + _catalog_updates(catalog)


def update_text(field_name, value, meme):
    """Callback for the Top/Bottom text inputs."""
    meme = state.set_text(meme, field_name, value)
    return meme, ui.render_meme(meme)


def new_image(meme, catalog, rng=random):
    """Callback for the new-image button: swaps in a random template, keeping the texts."""
    if not catalog.can_pick:
        gr.Warning("Meme templates are not loaded yet, keeping the current image.")
        return meme, ui.render_meme(meme)
    meme = state.with_random_image(meme, catalog, rng)
    logger.debug(f"Meme image changed to {meme.image_url}")
    return meme, ui.render_meme(meme)
