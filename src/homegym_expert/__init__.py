"""HomeGym Expert - rule-based home workout plan recommender."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("homegym-expert")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
