"""
vePFS Ext CLI - 命令行创建数据洞察任务
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import requests

from .exceptions import ConfigurationException
from .schemas import (
    CreateLensTaskRequest,
    LensAnalysisInfo,
    LensExportInfo,
    LensTargetInfo,
)
from .utils.logger import LOG_LEVELS, setup_logger, get_logger
from .vepfs_client import VEPFSExt


def parse_target(value: str) -> LensTargetInfo:
    """解析 FILESET_ID:PATH，FILESET_ID 可为空"""
    if ":" not in value:
        raise argparse.ArgumentTypeError(f"expected FILESET_ID:PATH, got {value!r}")
    fileset_id, relative_path = value.split(":", 1)
    return LensTargetInfo(fileset_id=fileset_id, relative_path=relative_path)


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog="vepfs-ext",
        description="vePFS Ext - 创建数据洞察任务",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  vepfs-ext --name daily-export --policy-id lp-xxx --file-system-id vepfs-xxx \\
            --target-path /data --content MetadataExport --export-path /data/.lens
  vepfs-ext --input task.json
        """,
    )

    parser.add_argument("--input", "-i", help="JSON 请求文件（OpenAPI 字段名），指定后忽略其他任务参数")
    parser.add_argument("--name", "-n", default="", help="任务名称")
    parser.add_argument("--policy-id", default="", help="数据洞察策略 ID")
    parser.add_argument("--file-system-id", default="", help="文件系统 ID")
    parser.add_argument("--target-path", default="", help="执行目录的绝对路径")
    parser.add_argument("--description", default="", help="任务描述")
    parser.add_argument(
        "--content",
        action="append",
        default=[],
        help="任务类型（MetadataExport / MetadataAnalyze），可重复",
    )

    export = parser.add_argument_group("导出任务")
    export.add_argument("--export-path", default="", help="导出目标目录的绝对路径")
    export.add_argument("--export-attrs", nargs="+", default=[], help="导出的文件属性")
    export.add_argument("--first-level-sub-dir", action="store_true", help="开启一级目录容量查询")
    export.add_argument("--second-level-sub-dir", action="store_true", help="开启二级目录容量查询")
    export.add_argument("--tos-bucket", default="", help="导出的目标 TOS 桶")
    export.add_argument("--tos-prefix", default="", help="导出的目标 TOS 路径前缀")
    export.add_argument("--enable-download", action="store_true", help="导出结果到控制台")

    analysis = parser.add_argument_group("分析任务")
    analysis.add_argument("--enable-analysis", action="store_true", help="开启结果分析")
    analysis.add_argument("--analysis-attrs", nargs="+", default=[], help="分析的文件属性")

    parser.add_argument(
        "--target",
        action="append",
        type=parse_target,
        default=[],
        metavar="FILESET_ID:PATH",
        help="任务执行范围，可重复；非 Fileset 目录写作 :PATH",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="日志级别，默认读取 LOG_LEVEL")

    return parser


def build_request(args: argparse.Namespace) -> CreateLensTaskRequest:
    """根据命令行参数构建请求"""
    if args.input:
        data = json.loads(Path(args.input).read_text(encoding="utf-8"))
        return CreateLensTaskRequest.model_validate(data)

    return CreateLensTaskRequest(
        lens_task_name=args.name,
        lens_policy_id=args.policy_id,
        file_system_id=args.file_system_id,
        target_path=args.target_path,
        description=args.description,
        lens_task_content=args.content,
        lens_export_info=LensExportInfo(
            export_path=args.export_path,
            export_attrs=args.export_attrs,
            first_level_sub_dir=args.first_level_sub_dir,
            second_level_sub_dir=args.second_level_sub_dir,
            tos_bucket=args.tos_bucket,
            tos_prefix=args.tos_prefix,
            enable_download=args.enable_download,
        ),
        lens_analysis_info=LensAnalysisInfo(
            enable_lens_analysis=args.enable_analysis,
            analysis_attrs=args.analysis_attrs,
        ),
        target_infos=args.target,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """主函数"""
    args = build_parser().parse_args(argv)

    setup_logger(args.log_level)
    logger = get_logger(__name__)

    try:
        params = build_request(args)
    except (OSError, ValueError) as e:
        logger.error(f"请求参数错误: {e}")
        print(f"\n❌ 请求参数错误: {e}")
        sys.exit(1)

    try:
        client = VEPFSExt()
    except ConfigurationException as e:
        logger.error(f"配置错误: {e.message} ({e.detail})")
        print(f"\n❌ 配置错误: {e.message}")
        print("请确保已配置 VOLCENGINE_ACCESS_KEY_ID / VOLCENGINE_ACCESS_KEY_SECRET / VOLCENGINE_REGION")
        sys.exit(1)

    try:
        result = client.create_lens_task(params)

    except requests.RequestException as e:
        logger.error(f"请求失败: {e}")
        print(f"\n❌ 创建失败: {e}")
        sys.exit(1)

    except Exception as e:
        logger.exception(f"未知错误: {e}")
        print(f"\n❌ 未知错误: {e}")
        sys.exit(1)

    print(f"\n✅ 数据洞察任务创建成功！")
    print(f"🆔 LensTaskId: {result.lens_task_id}")


if __name__ == "__main__":
    main()
