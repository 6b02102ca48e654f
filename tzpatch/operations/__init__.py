"""Pipeline operations.

Public API:
    - fetch_resource: Stream one remote resource to disk
    - run_merge_tool: Merge one resource into the target with icupkg
"""

from tzpatch.operations.download import fetch_resource
from tzpatch.operations.merge import run_merge_tool

__all__ = [
    "fetch_resource",
    "run_merge_tool",
]
