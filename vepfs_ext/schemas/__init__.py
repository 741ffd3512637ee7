"""
Schemas Module - 数据模型
"""

from .lens_task import (
    LensTaskContent,
    LensExportInfo,
    LensAnalysisInfo,
    LensTargetInfo,
    CreateLensTaskRequest,
    CreateLensTaskResponse,
)

__all__ = [
    "LensTaskContent",
    "LensExportInfo",
    "LensAnalysisInfo",
    "LensTargetInfo",
    "CreateLensTaskRequest",
    "CreateLensTaskResponse",
]
