"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from ragchat.api.routers.router_utils.document_utils import (
    cleanup_temp_file,
    temporary_upload,
)

__all__ = [
    "cleanup_temp_file",
    "temporary_upload",
]
