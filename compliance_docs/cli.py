"""Command-line front end: JSON package request in, PDF package out.

Usage:
    compliance-docs --input request.json --out packages/SO-2024-001
    compliance-docs --input request.json --out out --individual --no-stamp
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional

from .config import default_config
from .assembly.package import CompliancePackageGenerator
from .utils.io import load_json_robust, parse_package_request, safe_file_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an aviation compliance document package"
    )
    parser.add_argument("--input", required=True,
                        help="Path to request JSON (parts, complianceData, options)")
    parser.add_argument("--out", default="compliance_output", help="Output directory")
    parser.add_argument("--individual", action="store_true",
                        help="Also write every document as its own PDF")
    parser.add_argument("--no-stamp", action="store_true",
                        help="Do not stamp package page numbers on the merged PDF")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    payload, error = load_json_robust(args.input)
    if error:
        print(f"Could not read {args.input}: {error}", file=sys.stderr)
        return 1

    try:
        parts, compliance, options = parse_package_request(payload)
    except (TypeError, ValueError) as exc:
        print(f"Invalid package request: {exc}", file=sys.stderr)
        return 1

    config = default_config
    if args.no_stamp:
        config = replace(default_config, stamp_package_page_numbers=False)

    result = CompliancePackageGenerator(config).generate_package(parts, compliance, options)

    if not result.success:
        if result.missing_fields:
            print("Missing required fields:", file=sys.stderr)
            for field_name in result.missing_fields:
                print(f"  - {field_name}", file=sys.stderr)
        else:
            print(f"Package generation failed: {result.error}", file=sys.stderr)
        return 1

    os.makedirs(args.out, exist_ok=True)

    package_name = safe_file_name(
        config.package_file_template.format(order_number=compliance.order_info.order_number)
    )
    with open(os.path.join(args.out, package_name), "wb") as f:
        f.write(result.merged_package)

    if args.individual:
        for document in result.documents:
            with open(os.path.join(args.out, safe_file_name(document.name)), "wb") as f:
                f.write(document.data)

    with open(os.path.join(args.out, config.metadata_output_file), "w") as f:
        json.dump(result.to_dict(), f, indent=2)

    print(f"Compliance package: {os.path.join(args.out, package_name)}")
    print(f"  Documents: {len(result.documents)}")
    print(f"  Pages:     {result.total_pages} (+1 title page)")
    for document in result.documents:
        print(f"    - {document.name} ({document.pages} page(s))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
