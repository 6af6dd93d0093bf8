"""Text and console rendering of groups and history statistics."""

from typing import Sequence

from rich.console import Console
from rich.table import Table

from .history import GroupHistory
from .models import GENDERS, LEVELS, Student
from .scoring import pair_key, score_breakdown


def groups_to_text(groups: Sequence[Sequence[Student]]) -> str:
    return "\n".join(
        f"Group {idx}: {', '.join(s.name for s in group)}"
        for idx, group in enumerate(groups, 1)
    )


def status_message(score) -> str:
    return "Done (perfect constraints match)." if score == 0 else "Done (best effort)."


def member_label(student: Student) -> str:
    return f"{student.name} ({student.gender}, {student.level}, {student.exchange_code})"


def group_composition(group) -> str:
    """Attribute counts of a group, e.g. 'g:1/1/0 · lvl:1/1 · ex:1' (unknown values left out)."""
    genders = "/".join(str(sum(s.gender == g for s in group)) for g in GENDERS)
    levels = "/".join(str(sum(s.level == lv for s in group)) for lv in LEVELS)
    exchange = sum(s.exchange is True for s in group)
    return f"g:{genders} · lvl:{levels} · ex:{exchange}"


def print_groups(console: Console, groups, forbidden_pairs, target_size, weights, title="Groups"):
    """Display groups with each group's penalty terms."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Group", style="cyan", justify="right", no_wrap=True)
    table.add_column("Members", style="green")
    table.add_column("Size", justify="center", style="yellow")
    table.add_column("Make-up", style="blue", no_wrap=True)
    table.add_column("Repeats", justify="right")
    table.add_column("Gender", justify="right")
    table.add_column("Level", justify="right")
    table.add_column("Exchange", justify="right")
    table.add_column("Score", justify="right", style="bold")

    for idx, group in enumerate(groups, 1):
        terms = score_breakdown(group, forbidden_pairs, target_size, weights)
        table.add_row(
            str(idx),
            ", ".join(member_label(s) for s in group),
            str(len(group)),
            group_composition(group),
            f"{terms.forbidden:g}",
            f"{terms.gender:g}",
            f"{terms.level:g}",
            f"{terms.exchange:g}",
            f"{terms.total:g}",
        )

    console.print(table)


def print_statistics(console: Console, history: GroupHistory):
    """Print pair frequency statistics"""
    stats = history.get_pair_statistics()
    if not stats:
        console.print("\n[dim]No statistics available yet.[/dim]")
        return

    table = Table(title="📊 Pair Statistics", show_header=True, header_style="bold blue")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="center", style="yellow")
    table.add_row("Rounds", str(len(history)))
    table.add_row("Total unique pairs", str(stats["total_pairs"]))
    table.add_row("Pair frequency range", f"{stats['min_frequency']} - {stats['max_frequency']}")
    table.add_row("Mean pair frequency", f"{stats['mean_frequency']} ± {stats['std_frequency']}")
    for freq, count in sorted(stats["distribution"].items()):
        table.add_row(f"Met {freq} time(s)", f"{count} pairs")

    console.print()
    console.print(table)


def print_overlap_matrix(console: Console, history: GroupHistory, students, max_display=20):
    """Print how often each pair of students has met (limited for readability)"""
    if not history.pair_counts:
        console.print("\n[dim]No overlap data available yet.[/dim]")
        return

    people = sorted(students, key=lambda s: s.id)[:max_display]
    title = "Overlap Matrix"
    if len(students) > max_display:
        title += f" (showing first {max_display} students)"

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("")
    for person in people:
        table.add_column(person.name[:3], justify="right")

    for i, a in enumerate(people):
        row = [a.name[:9]]
        for j, b in enumerate(people):
            if i == j:
                row.append("—")
            elif i < j:
                row.append(str(history.pair_counts.get(pair_key(a, b), 0)))
            else:
                row.append("")
        table.add_row(*row)

    console.print()
    console.print(table)
