"""Catalog audit for content authors.

Checks the topic catalog for holes and inconsistencies and renders a
markdown report. Nothing is fixed automatically: duplicate names, repeated
keywords and unusual difficulties all affect ranking, so they are left for
authors to resolve.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .catalog import TopicRecord

KNOWN_DIFFICULTIES = ("Beginner", "Intermediate", "Advanced")


@dataclass
class AuditReport:
    """Findings from a catalog audit."""

    total_topics: int
    duplicate_names: list[str] = field(default_factory=list)
    duplicate_keywords: dict[str, list[str]] = field(default_factory=dict)  # name -> repeated keywords
    missing_keywords: list[str] = field(default_factory=list)
    unknown_difficulties: dict[str, str] = field(default_factory=dict)  # name -> difficulty
    category_counts: dict[str, int] = field(default_factory=dict)
    difficulty_counts: dict[str, int] = field(default_factory=dict)

    @property
    def issue_count(self) -> int:
        return (
            len(self.duplicate_names)
            + len(self.duplicate_keywords)
            + len(self.missing_keywords)
            + len(self.unknown_difficulties)
        )

    @property
    def is_clean(self) -> bool:
        return self.issue_count == 0


def audit_catalog(catalog: Sequence[TopicRecord]) -> AuditReport:
    """Audit a catalog without modifying it.

    Returns:
        AuditReport listing:
        - duplicate_names: names used more than once (compared ignoring case)
        - duplicate_keywords: topics repeating a keyword (ignoring case)
        - missing_keywords: topics with no keywords at all
        - unknown_difficulties: difficulties outside KNOWN_DIFFICULTIES
    """
    report = AuditReport(total_topics=len(catalog))
    known = {d.lower() for d in KNOWN_DIFFICULTIES}

    name_counts = Counter(t.name.lower() for t in catalog)
    reported = set()
    for topic in catalog:
        key = topic.name.lower()
        if name_counts[key] > 1 and key not in reported:
            report.duplicate_names.append(topic.name)
            reported.add(key)

        if not topic.keywords:
            report.missing_keywords.append(topic.name)
        else:
            keyword_counts = Counter(k.lower() for k in topic.keywords)
            repeated = [k for k, count in keyword_counts.items() if count > 1]
            if repeated:
                report.duplicate_keywords[topic.name] = repeated

        if topic.difficulty.lower() not in known:
            report.unknown_difficulties[topic.name] = topic.difficulty

    report.category_counts = dict(Counter(t.category for t in catalog))
    report.difficulty_counts = dict(Counter(t.difficulty for t in catalog))
    return report


def generate_report(report: AuditReport) -> str:
    """Render an audit as markdown."""
    text = f"""# Topic Catalog Audit Report

**Generated:** {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}

## Summary

| Metric | Count |
|--------|-------|
| Total Topics | {report.total_topics} |
| Categories | {len(report.category_counts)} |
| Duplicate Names | {len(report.duplicate_names)} |
| Topics With Repeated Keywords | {len(report.duplicate_keywords)} |
| Topics Without Keywords | {len(report.missing_keywords)} |
| Unknown Difficulties | {len(report.unknown_difficulties)} |

## Action Items

### 🔀 Duplicate Names
Topics sharing a name rank as separate results:

"""
    if report.duplicate_names:
        for name in report.duplicate_names:
            text += f"- `{name}`\n"
    else:
        text += "*None found*\n"

    text += """
### 🔁 Repeated Keywords
Each repeat adds to the per-word keyword bonus:

"""
    if report.duplicate_keywords:
        for name, keywords in report.duplicate_keywords.items():
            text += f"- `{name}`: {', '.join(keywords)}\n"
    else:
        text += "*None found*\n"

    text += """
### ⚠️ Topics Without Keywords
Only reachable through name, category or description:

"""
    if report.missing_keywords:
        for name in report.missing_keywords:
            text += f"- `{name}`\n"
    else:
        text += "*None found*\n"

    text += """
### ❓ Unknown Difficulties

"""
    if report.unknown_difficulties:
        for name, difficulty in report.unknown_difficulties.items():
            text += f"- `{name}`: {difficulty}\n"
    else:
        text += "*None found*\n"

    text += "\n## Topics per Category\n\n| Category | Topics |\n|----------|--------|\n"
    for category, count in sorted(report.category_counts.items()):
        text += f"| {category} | {count} |\n"

    text += "\n## Topics per Difficulty\n\n| Difficulty | Topics |\n|------------|--------|\n"
    for difficulty, count in sorted(report.difficulty_counts.items()):
        text += f"| {difficulty} | {count} |\n"

    return text
