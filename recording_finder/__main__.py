"""Entry point for ``python -m recording_finder``."""

from recording_finder.cli.app import app


if __name__ == "__main__":
    app()
