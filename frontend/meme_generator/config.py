# frontend/meme_generator/config.py
# DESIGNER'S NOTE:
# Centralizes all configuration for the meme generator. Defaults come from the
# environment (optionally a .env file next to the project), and command-line
# flags override them.

import argparse
import os

from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', '..', '.env')
load_dotenv(dotenv_path=env_path)

IMGFLIP_TEMPLATES_URL = "https://api.imgflip.com/get_memes"


def _env(name, default):
    """Reads an environment variable, treating a blank value as unset."""
    value = os.getenv(name, "").strip()
    return value or default


class AppConfig:
    """
    Parses command-line arguments, falling back to MEMEGEN_* environment variables,
    and exposes the settings used by the frontend.
    """
    def __init__(self, argv=None):
        parser = argparse.ArgumentParser(description="Meme Generator Launcher", allow_abbrev=False)
        parser.add_argument(
            "--port",
            type=int,
            default=_env("MEMEGEN_PORT", "7860"),
            help="Port to run the frontend server on (default: 7860)"
        )
        parser.add_argument(
            "--host",
            type=str,
            default=_env("MEMEGEN_HOST", "127.0.0.1"),
            help="Interface to bind the frontend server to (default: 127.0.0.1)"
        )
        parser.add_argument(
            "--templates-url",
            type=str,
            default=_env("MEMEGEN_TEMPLATES_URL", IMGFLIP_TEMPLATES_URL),
            help="Endpoint returning the meme template list (default: Imgflip get_memes)"
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=_env("MEMEGEN_TIMEOUT", "10"),
            help="Timeout in seconds for the template request (default: 10)"
        )
        parser.add_argument(
            "--share",
            action="store_true",
            help="Create a public Gradio share link"
        )

        # String defaults go through `type`, so a bad MEMEGEN_* value is reported as a usage error.
        # parse_known_args: Gradio reload mode and test runners pass extra arguments
        args, _ = parser.parse_known_args(argv)

        self.run_port = args.port
        self.host = args.host
        self.share = args.share

        self.TEMPLATES_URL = args.templates_url
        self.REQUEST_TIMEOUT = args.timeout

        self.LOG_DIR = _env(
            "MEMEGEN_LOG_DIR",
            os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', '..', 'logs')
        )
        self.LOG_LEVEL = _env("MEMEGEN_LOG_LEVEL", "INFO").upper()


# Create a single, globally accessible configuration instance.
config = AppConfig()
