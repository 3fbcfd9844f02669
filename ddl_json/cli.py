import argparse
import json
import sys

import yaml

from ddl_json.config import OUTPUT_FORMAT, OUTPUT_INDENT
from ddl_json.parser.ddl_state_machine import DDLParserError, parse_ddl
from ddl_json.utils.compress import ABSENT
from ddl_json.utils.file_loader import read_ddl_file
from ddl_json.utils.logger import setup_logger


logger = setup_logger("ddl2json")


def render(result, output_format: str = "json", indent: int = 2) -> str:
    """파싱 결과를 JSON 또는 YAML 문자열로 변환합니다."""
    if output_format == "yaml":
        return yaml.dump(
            result,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            indent=indent
        )
    return json.dumps(result, ensure_ascii=False, indent=indent)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddl2json",
        description="Convert a SQL DDL script into a JSON schema document",
    )
    parser.add_argument("ddl_file", nargs="?", help="Path to DDL SQL file")
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default=OUTPUT_FORMAT if OUTPUT_FORMAT in ("json", "yaml") else "json",
        help="Output format",
    )
    parser.add_argument("--indent", type=int, default=OUTPUT_INDENT, help="Output indentation")
    parser.add_argument("--output", help="Write output to this file instead of stdout")
    return parser


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if not args.ddl_file:
        print("Usage: ddl2json <ddl-file-path>", file=sys.stderr)
        return 1

    try:
        ddl_text = read_ddl_file(args.ddl_file)
    except FileNotFoundError:
        print(f"Error: File '{args.ddl_file}' does not exist.", file=sys.stderr)
        return 1

    try:
        result = parse_ddl(ddl_text)
    except DDLParserError as e:
        print(f"Error parsing DDL: {e}", file=sys.stderr)
        return 1

    if result is ABSENT:
        logger.info("no recognized objects in %s", args.ddl_file)
        result = []

    output = render(result, args.format, args.indent)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        logger.info("출력 파일 저장: %s", args.output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
