"""Telemetry and observability helpers.

This package emits deterministic stage events for parse runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
