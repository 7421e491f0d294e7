# frontend/run.py
# Entry point for running the meme generator straight from a source checkout.
# It puts the 'frontend' folder on the Python path so the 'meme_generator'
# package imports without being installed.

import sys
import os

def main():
    """
    Sets up the Python path and runs the meme generator.
    """
    project_root = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, project_root)

    print("Initializing Meme Generator...")

    from meme_generator.main import main as run_meme_generator
    run_meme_generator()

if __name__ == "__main__":
    main()
