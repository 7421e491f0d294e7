# frontend/meme_generator/api_client.py
# DESIGNER'S NOTE:
# The dedicated API client. It wraps the single request to the template service
# and turns its JSON payload into Template records, so that the handlers never
# deal with raw HTTP responses.

import logging

import requests

from .config import config
from .state import Template

logger = logging.getLogger(__name__)


class TemplateFetchError(Exception):
    """The template service answered, but not with a usable template list."""


def get_meme_templates(url=None, timeout=None):
    """Fetches the meme template list and returns it as a list of Template."""
    url = url or config.TEMPLATES_URL
    timeout = timeout or config.REQUEST_TIMEOUT
    logger.info(f"Requesting meme templates from {url}")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    try:
        payload = response.json()
    except ValueError as e:
        raise TemplateFetchError(f"Template service returned invalid JSON: {e}") from e
    templates = parse_templates(payload)
    logger.info(f"Received {len(templates)} meme templates.")
    return templates


def parse_templates(payload):
    """
    Extracts templates from a payload shaped like
    {"success": true, "data": {"memes": [{"url": ...}, ...]}}.
    Records without a usable url are skipped.
    """
    if not isinstance(payload, dict):
        raise TemplateFetchError("Template service returned an unexpected payload.")
    if payload.get("success") is False:
        raise TemplateFetchError(payload.get("error_message") or "Template service reported a failure.")

    data = payload.get("data")
    records = data.get("memes") if isinstance(data, dict) else None
    if not isinstance(records, list):
        raise TemplateFetchError("Template service response has no 'data.memes' list.")

    templates = []
    for record in records:
        try:
            templates.append(Template.from_record(record))
        except ValueError as e:
            logger.warning(f"Skipping template record: {e}")
    return templates
