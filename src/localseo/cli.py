"""Command-line interface for the structured data auditor."""

import argparse
import json
import sys
from pathlib import Path

from localseo.audit import audit_page, audit_url, audit_urls
from localseo.config import Config
from localseo.crawler import PageFetcher, PageFetchError
from localseo.logging_config import setup_logging
from localseo.report import render_audit_json, render_audit_markdown

REPORT_SEPARATOR = "\n\n---\n\n"


def _write_output(output: str, output_file=None):
    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"\nResults written to {output_file}", file=sys.stderr)
    else:
        print(output)


def audit_command(args, config: Config):
    """Audit one or more URLs (or a local HTML file) for structured data."""
    business_type = args.business_type or config.business_type

    if args.html_file:
        if len(args.urls) > 1:
            print("Error: --html-file audits exactly one URL", file=sys.stderr)
            sys.exit(1)
        html = Path(args.html_file).read_text(encoding="utf-8")
        results = [audit_page(html, args.urls[0], business_type)]
    else:
        fetcher = PageFetcher.from_config(config)

        if len(args.urls) == 1:
            try:
                results = [audit_url(args.urls[0], fetcher, business_type)]
            except PageFetchError as e:
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(1)
        else:
            outcomes = audit_urls(
                args.urls,
                fetcher=fetcher,
                business_type=business_type,
                max_workers=config.max_workers,
            )
            for outcome in outcomes:
                if not outcome.success:
                    print(f"Error: {outcome.error}", file=sys.stderr)
            results = [outcome.result for outcome in outcomes if outcome.success]
            if not results:
                sys.exit(1)

    if args.format == "json":
        if len(results) == 1:
            output = render_audit_json(results[0])
        else:
            output = json.dumps(
                [result.to_dict() for result in results], ensure_ascii=False, indent=2
            )
    else:
        output = REPORT_SEPARATOR.join(render_audit_markdown(r) for r in results)

    _write_output(output, args.output_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Local SEO structured data auditor - extract, evaluate and generate Schema.org JSON-LD"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging verbosity (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    audit_parser = subparsers.add_parser(
        "audit", help="Audit the structured data of one or more pages."
    )
    audit_parser.add_argument(
        "urls", nargs="+", help="URLs to audit (one or more)"
    )
    audit_parser.add_argument(
        "--html-file",
        help="Audit a local HTML file instead of fetching (URL is used as page URL)",
    )
    audit_parser.add_argument(
        "--format",
        choices=["markdown", "json"],
        default="markdown",
        help="Output format (default: markdown)",
    )
    audit_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file instead of stdout",
    )
    audit_parser.add_argument(
        "--business-type",
        help="LocalBusiness subtype for generated JSON-LD (default: BUSINESS_TYPE or FuneralHome)",
    )
    audit_parser.set_defaults(func=audit_command)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = Config.from_env()

    setup_logging(
        level=args.log_level or config.log_level,
        log_file=args.log_file,
    )

    if hasattr(args, "func"):
        args.func(args, config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
