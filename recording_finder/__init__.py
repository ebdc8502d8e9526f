"""Recording Finder - locate audio recordings by weekday or fuzzy filename text."""

from recording_finder.constants import VERSION

__version__ = VERSION
