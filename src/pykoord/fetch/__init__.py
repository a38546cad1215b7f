"""Asynchronous resource fetching for definitions and algorithms."""

from pykoord.fetch.base import ResourceFetcher
from pykoord.fetch.loader import AlgorithmLoader
from pykoord.fetch.static import StaticFetcher

__all__ = ["AlgorithmLoader", "ResourceFetcher", "StaticFetcher"]
