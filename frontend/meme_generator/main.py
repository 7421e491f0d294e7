# frontend/meme_generator/main.py
# DESIGNER'S NOTE:
# This file assembles the UI and wires the event handlers.

import logging
import os
from functools import partial

import gradio as gr

from .config import config
from .logging_config import setup_logging
from . import handlers
from . import state
from . import ui

logger = logging.getLogger(__name__)


def build_app():
    """Builds the Gradio Blocks app: the header banner and the meme editor."""
    with gr.Blocks(title="Meme Generator") as demo:
        # --- 1. Build UI ---
        ui.create_header()
        core_ui = ui.create_meme_editor(state.MemeState(), state.TemplateCatalog())

        # --- 2. Wire Event Handlers ---
        catalog_outputs = [
            core_ui["catalog_state"], core_ui["load_status"],
            core_ui["new_image_btn"], core_ui["reload_btn"]
        ]
        demo.load(handlers.load_templates, outputs=catalog_outputs)
        core_ui["reload_btn"].click(handlers.load_templates, outputs=catalog_outputs)

        meme_outputs = [core_ui["meme_state"], core_ui["preview"]]
        core_ui["top_input"].input(
            partial(handlers.update_text, "top_text"),
            inputs=[core_ui["top_input"], core_ui["meme_state"]],
            outputs=meme_outputs,
            show_progress="hidden"
        )
        core_ui["bottom_input"].input(
            partial(handlers.update_text, "bottom_text"),
            inputs=[core_ui["bottom_input"], core_ui["meme_state"]],
            outputs=meme_outputs,
            show_progress="hidden"
        )
        core_ui["new_image_btn"].click(
            handlers.new_image,
            inputs=[core_ui["meme_state"], core_ui["catalog_state"]],
            outputs=meme_outputs
        )

    return demo


def main():
    """
    Builds the Gradio UI, wires up all the event handlers, and launches the interface.
    """
    os.environ["GRADIO_ANALYTICS_ENABLED"] = "false"
    setup_logging()
    logger.info(f"Template service: {config.TEMPLATES_URL} (timeout {config.REQUEST_TIMEOUT}s)")

    demo = build_app()

    logger.info(f"Meme Generator starting on http://{config.host}:{config.run_port}")
    demo.launch(server_name=config.host, server_port=config.run_port, share=config.share, inbrowser=False)
