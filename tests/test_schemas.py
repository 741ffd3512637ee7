from __future__ import annotations

import json

from vepfs_ext.schemas import (
    CreateLensTaskRequest,
    CreateLensTaskResponse,
    LensTaskContent,
)


ZERO_BODY = {
    "LensTaskName": "",
    "LensPolicyId": "",
    "FileSystemId": "",
    "TargetPath": "",
    "Description": "",
    "LensTaskContent": [],
    "LensExportInfo": {
        "ExportPath": "",
        "ExportAttrs": [],
        "FirstLevelSubDir": False,
        "SecondLevelSubDir": False,
        "TosBucket": "",
        "TosPrefix": "",
        "EnableDownload": False,
    },
    "LensAnalysisInfo": {
        "EnableLensAnalysis": False,
        "AnalysisAttrs": [],
    },
    "TargetInfos": [],
}


def test_empty_request_serializes_zero_values() -> None:
    assert json.loads(CreateLensTaskRequest().to_body()) == ZERO_BODY


def test_request_serializes_with_wire_names(lens_request: CreateLensTaskRequest) -> None:
    body = json.loads(lens_request.to_body())

    assert body == {
        "LensTaskName": "daily-export",
        "LensPolicyId": "lp-123",
        "FileSystemId": "vepfs-abc",
        "TargetPath": "/data",
        "Description": "nightly metadata export",
        "LensTaskContent": ["MetadataExport", "MetadataAnalyze"],
        "LensExportInfo": {
            "ExportPath": "/data/.lens",
            "ExportAttrs": ["size", "mtime"],
            "FirstLevelSubDir": True,
            "SecondLevelSubDir": False,
            "TosBucket": "lens-bucket",
            "TosPrefix": "exports/",
            "EnableDownload": True,
        },
        "LensAnalysisInfo": {
            "EnableLensAnalysis": True,
            "AnalysisAttrs": ["size"],
        },
        "TargetInfos": [
            {"FilesetId": "", "RelativePath": "/data/a"},
            {"FilesetId": "fs-1", "RelativePath": "b/c"},
        ],
    }


def test_request_accepts_wire_names() -> None:
    request = CreateLensTaskRequest.model_validate(
        {
            "LensTaskName": "t1",
            "LensExportInfo": {"TosBucket": "bkt"},
            "TargetInfos": [{"FilesetId": "fs-9", "RelativePath": "x"}],
        }
    )

    assert request.lens_task_name == "t1"
    assert request.lens_export_info.tos_bucket == "bkt"
    assert request.target_infos[0].fileset_id == "fs-9"
    assert request.lens_analysis_info.enable_lens_analysis is False


def test_task_content_is_not_validated() -> None:
    request = CreateLensTaskRequest(lens_task_content=["SomethingElse"])
    assert request.lens_task_content == ["SomethingElse"]


def test_task_content_constants() -> None:
    assert LensTaskContent.METADATA_EXPORT.value == "MetadataExport"
    assert LensTaskContent.METADATA_ANALYZE.value == "MetadataAnalyze"


def test_response_ignores_unknown_fields() -> None:
    response = CreateLensTaskResponse.model_validate({"LensTaskId": "abc-123", "Extra": 1})
    assert response.lens_task_id == "abc-123"
    assert CreateLensTaskResponse().lens_task_id == ""
