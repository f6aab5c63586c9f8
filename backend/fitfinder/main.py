"""
FitFinder 命令行入口

使用示例：
    python -m fitfinder.main init-db
    python -m fitfinder.main apply resume.pdf --jd "Senior Go engineer"
    python -m fitfinder.main apply resume.pdf --job-id <id> --org-id <id> --email me@example.com
"""

import argparse
import base64
import json
import sys
from pathlib import Path
from typing import List, Optional

from fitfinder.db.init_db import init_db
from fitfinder.services import ApplicationService, RequestContext


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fitfinder", description="FitFinder 后端命令行工具")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="创建数据库表结构")

    apply_parser = subparsers.add_parser("apply", help="对本地 PDF 简历执行一次投递")
    apply_parser.add_argument("pdf", type=Path, help="简历 PDF 路径")
    apply_parser.add_argument("--jd", default=None, help="职位描述文本")
    apply_parser.add_argument("--job-id", default=None, help="职位 ID")
    apply_parser.add_argument("--org-id", default=None, help="组织 ID")
    apply_parser.add_argument("--email", default=None, help="以该用户身份投递")
    apply_parser.add_argument("--no-save", action="store_true", help="只预览匹配结果，不写库")

    return parser


def run_apply(args: argparse.Namespace) -> int:
    """读取本地 PDF 并执行投递，结果以 JSON 打印"""
    if not args.pdf.exists():
        print(f"[Main] 文件不存在: {args.pdf}", file=sys.stderr)
        return 1

    engine = init_db()
    payload = {
        "fileName": args.pdf.name,
        "mimeType": "application/pdf",
        "contentBase64": base64.b64encode(args.pdf.read_bytes()).decode("ascii"),
        "jobDescription": args.jd,
        "jobId": args.job_id,
        "orgId": args.org_id,
    }

    service = ApplicationService(RequestContext(args.email), engine=engine)
    if args.no_save:
        result = service.upload_resume(payload)
    else:
        result = service.apply_resume(payload)

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 1 if result.get("error") else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "init-db":
        init_db()
        return 0
    return run_apply(args)


if __name__ == "__main__":
    sys.exit(main())
