"""Orchestration layer.

This module contains the orchestrator that sequences downloads and merges
into a single patch run.
"""

from tzpatch.orchestrators.resource_patch import ResourcePatch

__all__ = [
    "ResourcePatch",
]
