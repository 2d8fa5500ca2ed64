"""Markdown formatter for progress reports."""

from __future__ import annotations

from energy_zen.progress.models import ProgressSnapshot


def format_report(snapshot: ProgressSnapshot, created: str) -> str:
    """Format a ProgressSnapshot as Markdown.

    Args:
        snapshot: Computed progress snapshot.
        created: Report date (YYYY-MM-DD) for frontmatter and title.

    Returns:
        Complete Markdown string with frontmatter.
    """
    s = snapshot
    lines: list[str] = []

    # Frontmatter
    lines.append("---")
    lines.append(f"created: {created}")
    lines.append("tags: [log/energy, type/progress_report]")
    lines.append("status: auto_generated")
    lines.append(f"logs: {s.log_count}")
    lines.append(f"streak: {s.current_streak}")
    lines.append(f"points: {s.total_points}")
    if s.preferred_period:
        lines.append(f"preferred_period: {s.preferred_period}")
    lines.append("---")
    lines.append("")

    lines.append(f"# Energy Progress: {created}")
    lines.append("")

    lines.append("## Progress")
    lines.append(f"- Energy Points: {s.total_points}")
    lines.append(f"- Current Streak: {s.current_streak} days")
    lines.append(f"- Energy Battery: {s.battery_level}%")
    lines.append(f"- Preferred Period: {s.preferred_period or '(unknown)'}")
    lines.append("")

    _format_challenge(lines, s)
    _format_achievements(lines, s)

    lines.append("## Insights")
    if s.insights:
        for insight in s.insights:
            lines.append(f"- {insight}")
    else:
        lines.append("- (none)")
    lines.append("")

    lines.append("## Activity Impact")
    if s.activity_impact_ranking:
        for item in s.activity_impact_ranking:
            lines.append(f"- {item.activity}: {item.impact:.1f} ({item.count} log(s))")
    else:
        lines.append("- (none)")
    lines.append("")

    lines.append("## Energy Trend")
    if s.energy_trend:
        for point in s.energy_trend:
            lines.append(f"- {point.label}: {point.energy_level}/10")
    else:
        lines.append("- (none)")
    lines.append("")

    return "\n".join(lines)


def _format_challenge(lines: list[str], s: ProgressSnapshot) -> None:
    """Append the 7-day challenge section to lines."""
    c = s.challenge
    lines.append("## 7-Day Challenge")
    lines.append(f"{c.unique_days}/7 Days ({c.progress_pct}% Complete)")
    if c.unlocked:
        lines.append("Personalised insights unlocked!")
    else:
        lines.append(f"{c.days_remaining} days until personalised insights")
    lines.append("")


def _format_achievements(lines: list[str], s: ProgressSnapshot) -> None:
    """Append the achievements section; locked until the challenge is done."""
    lines.append("## Zen Achievements")
    if not s.has_unlocked_milestones:
        lines.append("Complete 7-day challenge to unlock Zen Milestones")
        lines.append("")
        return

    unlocked = sum(1 for a in s.achievement_details if a.unlocked)
    lines.append(
        f"Achievements Unlocked: {unlocked}/{len(s.achievement_details)}"
        f" ({s.mastery_pct}%)"
    )
    for a in s.achievement_details:
        mark = "x" if a.unlocked else " "
        lines.append(f"- [{mark}] **{a.title}**: {a.description}")
    lines.append("")
