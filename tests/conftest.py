from __future__ import annotations

import pytest

from vepfs_ext.config import Settings
from vepfs_ext.schemas import (
    CreateLensTaskRequest,
    LensAnalysisInfo,
    LensExportInfo,
    LensTargetInfo,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        volcengine_access_key_id="AKLTtest",
        volcengine_access_key_secret="c2VjcmV0",
        volcengine_region="cn-beijing",
    )


@pytest.fixture
def lens_request() -> CreateLensTaskRequest:
    return CreateLensTaskRequest(
        lens_task_name="daily-export",
        lens_policy_id="lp-123",
        file_system_id="vepfs-abc",
        target_path="/data",
        description="nightly metadata export",
        lens_task_content=["MetadataExport", "MetadataAnalyze"],
        lens_export_info=LensExportInfo(
            export_path="/data/.lens",
            export_attrs=["size", "mtime"],
            first_level_sub_dir=True,
            tos_bucket="lens-bucket",
            tos_prefix="exports/",
            enable_download=True,
        ),
        lens_analysis_info=LensAnalysisInfo(
            enable_lens_analysis=True,
            analysis_attrs=["size"],
        ),
        target_infos=[
            LensTargetInfo(fileset_id="", relative_path="/data/a"),
            LensTargetInfo(fileset_id="fs-1", relative_path="b/c"),
        ],
    )
