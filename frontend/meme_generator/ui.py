# frontend/meme_generator/ui.py
# DESIGNER'S NOTE:
# Builds the Gradio components (header banner and meme editor) and renders the
# meme preview. Styling is inlined into the generated HTML so the page looks
# the same regardless of the Gradio theme.

import html
import os

import gradio as gr

from .state import LoadStatus

ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")

HEADER_STYLE = (
    "display:flex;align-items:center;gap:12px;padding:16px 24px;"
    "background:linear-gradient(90deg,#672280 1.18%,#a626d3 100%);color:#ffffff;border-radius:8px;"
)
MEME_STYLE = "position:relative;display:flex;justify-content:center;max-width:560px;margin:0 auto;"
IMAGE_STYLE = "max-width:100%;border-radius:4px;"
OVERLAY_STYLE = (
    "position:absolute;left:0;right:0;width:100%;text-align:center;margin:16px 0;padding:0 8px;"
    "box-sizing:border-box;font-family:Impact,'Anton',sans-serif;font-size:2em;text-transform:uppercase;"
    "color:#ffffff;letter-spacing:1px;overflow-wrap:break-word;"
    "text-shadow:2px 2px 0 #000,-2px -2px 0 #000,2px -2px 0 #000,-2px 2px 0 #000,"
    "0 2px 0 #000,2px 0 0 #000,0 -2px 0 #000,-2px 0 0 #000,2px 2px 5px #000;"
)


def load_troll_face():
    with open(os.path.join(ASSETS_DIR, "troll-face.svg"), encoding="utf-8") as f:
        return f.read()


def render_header():
    """Static banner: the troll face and the app title."""
    return (
        f'<header class="header" style="{HEADER_STYLE}">'
        f'{load_troll_face()}'
        '<h1 style="margin:0;font-size:1.6em;color:#ffffff;">Meme Generator</h1>'
        '</header>'
    )


def render_meme(meme):
    """Renders the meme preview: the image with the two text overlays on top."""
    return (
        f'<div class="meme" style="{MEME_STYLE}">'
        f'<img src="{html.escape(meme.image_url, quote=True)}" alt="{html.escape(meme.image_name, quote=True)}"'
        f' style="{IMAGE_STYLE}" />'
        f'<span class="top" style="{OVERLAY_STYLE}top:0;">{html.escape(meme.top_text)}</span>'
        f'<span class="bottom" style="{OVERLAY_STYLE}bottom:0;">{html.escape(meme.bottom_text)}</span>'
        '</div>'
    )


def render_status(catalog):
    """One-line Markdown describing where template loading stands."""
    if catalog.status is LoadStatus.NOT_LOADED:
        return "⏳ Loading meme templates..."
    if catalog.status is LoadStatus.FAILED:
        return f"🔴 Could not load meme templates: {catalog.error}"
    if not catalog.templates:
        return "🟡 The template service returned no templates."
    return f"🟢 {len(catalog.templates)} meme templates ready."


def create_header():
    """Builds the decorative header. It has no inputs and no outputs."""
    return gr.HTML(render_header())


def create_meme_editor(initial_meme, initial_catalog):
    """Builds the form (two text inputs and the new-image button) and the meme preview."""
    meme_state = gr.State(initial_meme)
    catalog_state = gr.State(initial_catalog)

    with gr.Column():
        with gr.Row():
            top_input = gr.Textbox(label="Top Text", placeholder="Shut up", value=initial_meme.top_text)
            bottom_input = gr.Textbox(label="Bottom Text", placeholder="And take my money", value=initial_meme.bottom_text)
        new_image_btn = gr.Button("Get a new meme image 🖼️", variant="primary", interactive=False)
        with gr.Row():
            load_status = gr.Markdown(render_status(initial_catalog))
            reload_btn = gr.Button("🔄 Reload templates", variant="secondary", visible=False, size="sm")
        preview = gr.HTML(render_meme(initial_meme))

    components = {
        "meme_state": meme_state, "catalog_state": catalog_state,
        "top_input": top_input, "bottom_input": bottom_input,
        "new_image_btn": new_image_btn, "load_status": load_status,
        "reload_btn": reload_btn, "preview": preview
    }
    return components
