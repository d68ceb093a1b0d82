"""Bor receipt storage rules, span and snapshot stores, and an async Heimdall client."""

__version__ = "0.1.0"