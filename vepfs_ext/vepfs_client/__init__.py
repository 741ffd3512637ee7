"""
vePFS Ext Client Module
"""

from .base import CREATE_LENS_TASKS, JSON_CONTENT_TYPE, VEPFSExtBase
from .request import Operation, LensTaskRequest, AsyncLensTaskRequest
from .client import VEPFSExt
from .async_client import AsyncVEPFSExt

__all__ = [
    "CREATE_LENS_TASKS",
    "JSON_CONTENT_TYPE",
    "VEPFSExtBase",
    "Operation",
    "LensTaskRequest",
    "AsyncLensTaskRequest",
    "VEPFSExt",
    "AsyncVEPFSExt",
]
