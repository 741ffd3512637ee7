"""
vePFS Ext - 火山引擎 vePFS 客户端扩展（数据洞察任务）
"""

from .config import Settings, get_settings
from .exceptions import AppException, ConfigurationException
from .schemas import (
    LensTaskContent,
    LensExportInfo,
    LensAnalysisInfo,
    LensTargetInfo,
    CreateLensTaskRequest,
    CreateLensTaskResponse,
)
from .vepfs_client import VEPFSExt, AsyncVEPFSExt, LensTaskRequest, AsyncLensTaskRequest

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "AppException",
    "ConfigurationException",
    "LensTaskContent",
    "LensExportInfo",
    "LensAnalysisInfo",
    "LensTargetInfo",
    "CreateLensTaskRequest",
    "CreateLensTaskResponse",
    "VEPFSExt",
    "AsyncVEPFSExt",
    "LensTaskRequest",
    "AsyncLensTaskRequest",
]
