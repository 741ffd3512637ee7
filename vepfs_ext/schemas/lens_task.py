"""
Lens Task Schemas - 数据洞察任务数据模型

字段名为 snake_case，序列化时使用 alias（与 vePFS OpenAPI 字段名一致）。
"""

from typing import List
from enum import Enum
from pydantic import BaseModel, Field


class LensTaskContent(str, Enum):
    """数据洞察任务类型"""

    METADATA_EXPORT = "MetadataExport"    # 导出任务
    METADATA_ANALYZE = "MetadataAnalyze"  # 分析任务


class LensExportInfo(BaseModel):
    """导出任务详情"""

    export_path: str = Field(default="", alias="ExportPath", description="导出目标目录的绝对路径")
    export_attrs: List[str] = Field(default_factory=list, alias="ExportAttrs", description="导出的文件属性")
    first_level_sub_dir: bool = Field(default=False, alias="FirstLevelSubDir", description="是否开启一级目录容量查询")
    second_level_sub_dir: bool = Field(default=False, alias="SecondLevelSubDir", description="是否开启二级目录容量查询")
    tos_bucket: str = Field(default="", alias="TosBucket", description="导出的目标 TOS 桶名称")
    tos_prefix: str = Field(default="", alias="TosPrefix", description="导出的目标 TOS 路径前缀")
    enable_download: bool = Field(default=False, alias="EnableDownload", description="是否导出结果到控制台")

    class Config:
        populate_by_name = True


class LensAnalysisInfo(BaseModel):
    """分析任务详情"""

    # lens_task_content 包含 MetadataAnalyze 时应为 True，由服务端校验
    enable_lens_analysis: bool = Field(default=False, alias="EnableLensAnalysis", description="是否开启结果分析")
    analysis_attrs: List[str] = Field(default_factory=list, alias="AnalysisAttrs", description="分析的文件属性")

    class Config:
        populate_by_name = True


class LensTargetInfo(BaseModel):
    """任务执行目录

    fileset_id 为空时 relative_path 是文件系统内的绝对路径，
    否则是相对 Fileset 的路径。
    """

    fileset_id: str = Field(default="", alias="FilesetId", description="Fileset ID")
    relative_path: str = Field(default="", alias="RelativePath", description="执行目录")

    class Config:
        populate_by_name = True


class CreateLensTaskRequest(BaseModel):
    """创建数据洞察任务请求"""

    lens_task_name: str = Field(default="", alias="LensTaskName", description="任务名称")
    lens_policy_id: str = Field(default="", alias="LensPolicyId", description="关联的数据洞察策略 ID")
    file_system_id: str = Field(default="", alias="FileSystemId", description="文件系统 ID")
    target_path: str = Field(default="", alias="TargetPath", description="执行目录的绝对路径")
    description: str = Field(default="", alias="Description", description="任务描述")
    lens_task_content: List[str] = Field(
        default_factory=list,
        alias="LensTaskContent",
        description="任务类型，取值见 LensTaskContent",
    )
    lens_export_info: LensExportInfo = Field(
        default_factory=LensExportInfo,
        alias="LensExportInfo",
        description="导出任务详情",
    )
    lens_analysis_info: LensAnalysisInfo = Field(
        default_factory=LensAnalysisInfo,
        alias="LensAnalysisInfo",
        description="分析任务详情",
    )
    target_infos: List[LensTargetInfo] = Field(
        default_factory=list,
        alias="TargetInfos",
        description="任务执行范围",
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "LensTaskName": "daily-export",
                "LensPolicyId": "lp-xxxx",
                "FileSystemId": "vepfs-xxxx",
                "TargetPath": "/data",
                "LensTaskContent": ["MetadataExport"],
                "LensExportInfo": {"ExportPath": "/data/.lens", "ExportAttrs": ["size", "mtime"]},
                "TargetInfos": [{"FilesetId": "", "RelativePath": "/data"}],
            }
        }

    def to_body(self) -> str:
        """序列化为请求体 JSON"""
        return self.model_dump_json(by_alias=True)


class CreateLensTaskResponse(BaseModel):
    """创建数据洞察任务响应"""

    lens_task_id: str = Field(default="", alias="LensTaskId", description="任务 ID")

    class Config:
        populate_by_name = True
