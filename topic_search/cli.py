"""Command-line interface for topic search.

Usage:
    topic-search search machine learning
    topic-search search react --limit 3 --json
    topic-search suggest --count 6 --seed 42
    topic-search category "Web Development"
    topic-search difficulty beginner
    topic-search explain py --topic Python
    topic-search audit --output audit_report.md
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from .audit import audit_catalog, generate_report
from .catalog import CatalogError, TopicCatalog, TopicRecord, load_default_catalog
from .search_engine import TopicSearchEngine, trim_query


def _print_topics(topics: list[TopicRecord], as_json: bool) -> None:
    if as_json:
        print(json.dumps([t.to_dict() for t in topics], indent=2))
        return
    for i, topic in enumerate(topics, 1):
        print(f"{i}. {topic.name} [{topic.category} · {topic.difficulty}]")
        print(f"   {topic.description}")


def cmd_search(engine: TopicSearchEngine, args) -> int:
    query = " ".join(args.query)
    results = engine.search(query, limit=args.limit)

    if args.json:
        _print_topics(results, as_json=True)
        return 0

    print(f"🔍 Searching for: '{query}'")
    if len(trim_query(query)) < engine.min_query_length:
        print(f"\n⚠️  Query must be at least {engine.min_query_length} characters")
    elif results:
        print(f"\n📋 Found {len(results)} topics:")
        _print_topics(results, as_json=False)
    else:
        print("\n❌ No matches found")
    return 0


def cmd_suggest(engine: TopicSearchEngine, args) -> int:
    if args.seed is not None:
        engine.rng = random.Random(args.seed)
    _print_topics(engine.suggest(args.count), args.json)
    return 0


def cmd_category(engine: TopicSearchEngine, args) -> int:
    results = engine.by_category(args.name)
    if not results and not args.json:
        print(f"❌ No topics in category '{args.name}'")
        print(f"   Categories: {', '.join(engine.catalog.categories())}")
        return 0
    _print_topics(results, args.json)
    return 0


def cmd_difficulty(engine: TopicSearchEngine, args) -> int:
    results = engine.by_difficulty(args.level)
    if not results and not args.json:
        print(f"❌ No topics at difficulty '{args.level}'")
        print(f"   Difficulties: {', '.join(engine.catalog.difficulties())}")
        return 0
    _print_topics(results, args.json)
    return 0


def cmd_explain(engine: TopicSearchEngine, args) -> int:
    query = " ".join(args.query)
    if args.topic:
        topic = engine.catalog.find(args.topic)
        if topic is None:
            print(f"❌ Unknown topic '{args.topic}'", file=sys.stderr)
            return 1
        topics = [topic]
    else:
        topics = engine.search(query)

    breakdowns = [engine.explain(query, t) for t in topics]
    if args.json:
        print(json.dumps([b.to_dict() for b in breakdowns], indent=2))
        return 0

    print(f"\n=== Query: {query} ===\n")
    for b in breakdowns:
        print(f"{b.topic}: {b.total}")
        for award in b.awards:
            print(f"   - {award.rule}: '{award.matched}' → +{award.points}")
    return 0


def cmd_audit(engine: TopicSearchEngine, args) -> int:
    report = audit_catalog(engine.catalog)
    text = generate_report(report)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"📄 Report saved to: {args.output}")
    else:
        print(text)
    print(f"{'✅' if report.is_clean else '⚠️ '} {report.issue_count} issues in {report.total_topics} topics")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="topic-search",
        description="Search the computer-science topic catalog",
    )
    parser.add_argument("--catalog", type=Path, help="Topic catalog JSON file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("search", help="Rank topics for a query")
    p.add_argument("query", nargs="+")
    p.add_argument("--limit", type=int, default=None, help="Max results")
    p.add_argument("--json", action="store_true", help="Print JSON")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("suggest", help="Random topic suggestions")
    p.add_argument("--count", type=int, default=None, help="Number of topics")
    p.add_argument("--seed", type=int, default=None, help="Seed for repeatable picks")
    p.add_argument("--json", action="store_true", help="Print JSON")
    p.set_defaults(func=cmd_suggest)

    p = sub.add_parser("category", help="Topics in a category")
    p.add_argument("name")
    p.add_argument("--json", action="store_true", help="Print JSON")
    p.set_defaults(func=cmd_category)

    p = sub.add_parser("difficulty", help="Topics at a difficulty")
    p.add_argument("level")
    p.add_argument("--json", action="store_true", help="Print JSON")
    p.set_defaults(func=cmd_difficulty)

    p = sub.add_parser("explain", help="Show how topics are scored")
    p.add_argument("query", nargs="+")
    p.add_argument("--topic", help="Explain this topic instead of the top results")
    p.add_argument("--json", action="store_true", help="Print JSON")
    p.set_defaults(func=cmd_explain)

    p = sub.add_parser("audit", help="Check the catalog for content issues")
    p.add_argument("--output", help="Write the markdown report to this file")
    p.set_defaults(func=cmd_audit)

    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            stream=sys.stderr,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        catalog = TopicCatalog.from_json(args.catalog) if args.catalog else load_default_catalog()
        engine = TopicSearchEngine(catalog)
    except (CatalogError, OSError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return args.func(engine, args)


if __name__ == "__main__":
    sys.exit(main())
