"""Output handling package for Recording Finder."""
from recording_finder.output.protocols import OutputHandler
from recording_finder.output.console import ConsoleOutputHandler

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
]
