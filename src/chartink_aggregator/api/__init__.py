"""HTTP host exposing the aggregated screener feed."""

from .app import create_app

__all__ = ["create_app"]
