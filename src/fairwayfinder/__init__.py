"""FairwayFinder tee-time acquisition engine."""

__version__ = "0.1.0"
