"""Example usage of the structured data auditor - Single page audit."""

from localseo import Config, PageFetcher, PageFetchError, audit_url, render_audit_markdown


def main():
    """Run example structured data audit."""

    # Initialize the fetcher using .env configuration
    config = Config.from_env()
    fetcher = PageFetcher.from_config(config)

    # Audit a single URL
    url = "https://example.com"
    print(f"Auditing {url}...")

    try:
        result = audit_url(url, fetcher, business_type=config.business_type)
    except PageFetchError as e:
        print(f"Failed to fetch: {e}")
        return

    print(f"\nStructured data items: {len(result.items)}")
    for item in result.items:
        print(f"  • {item.schema_type} ({item.source.value}): {item.evaluation.label.display}")

    print("\nHigh priority gaps:")
    for gap in result.missing_high:
        print(f"  • {gap.type}")

    # Full Markdown report
    print("\n" + "=" * 60)
    print(render_audit_markdown(result))


if __name__ == "__main__":
    main()
