"""Group Balancer CLI - balanced random groups that avoid repeating pairs

Usage: group-balancer roster.txt [options]
"""

import logging
import sys

import click
import numpy as np
from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfiguration
from .history import GroupHistory, parse_groups_text
from .models import DEFAULT_WEIGHTS, Weights
from .optimizer import optimize_with_restarts
from .render import (
    groups_to_text,
    print_groups,
    print_overlap_matrix,
    print_statistics,
    status_message,
)
from .roster import ROSTER_LEGEND, parse_students

console = Console()


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command(context_settings={"auto_envvar_prefix": "GROUP_BALANCER"})
@click.argument("roster", type=click.File("r", encoding="utf-8"), required=False)
@click.option("--group-size", "-g", type=int, default=3, show_default=True, help="Target size of each group")
@click.option("--iterations", "-i", type=int, default=12000, show_default=True, help="Search iterations per run")
@click.option("--rounds", "-r", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of consecutive groupings; each one avoids the pairs of the previous ones")
@click.option("--restarts", type=int, default=1, show_default=True, help="Independent searches per round")
@click.option("--previous", "-p", type=click.File("r", encoding="utf-8"), multiple=True,
              help="Listing of earlier groups ('Group 1: a, b, ...') whose pairs should not repeat")
@click.option("--seed", type=int, help="Random seed for reproducible results")
@click.option("--forbid-pair-weight", type=float, default=DEFAULT_WEIGHTS.forbid_pair, show_default=True)
@click.option("--gender-weight", type=float, default=DEFAULT_WEIGHTS.gender_imbalance, show_default=True)
@click.option("--level-weight", type=float, default=DEFAULT_WEIGHTS.level_imbalance, show_default=True)
@click.option("--exchange-weight", type=float, default=DEFAULT_WEIGHTS.exchange_imbalance, show_default=True)
@click.option("--size-weight", type=float, default=DEFAULT_WEIGHTS.size_imbalance, show_default=True)
@click.option("--output", "-o", type=click.File("w", encoding="utf-8"), help="Write the group listing to a file")
@click.option("--show-stats", is_flag=True, help="Show pair statistics after generation")
@click.option("--show-matrix", is_flag=True, help="Show pair overlap matrix after generation")
@click.option("--legend", is_flag=True, help="Print the roster format legend and exit")
@click.option("--quiet", "-q", is_flag=True, help="Only output the groups")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.help_option("--help", "-h")
def main(
    roster,
    group_size: int,
    iterations: int,
    rounds: int,
    restarts: int,
    previous,
    seed: int | None,
    forbid_pair_weight: float,
    gender_weight: float,
    level_weight: float,
    exchange_weight: float,
    size_weight: float,
    output,
    show_stats: bool,
    show_matrix: bool,
    legend: bool,
    quiet: bool,
    verbose: bool,
):
    """Create balanced random groups from a roster.

    Groups mix gender, level and exchange status where possible and avoid
    putting together students who already shared a group.

    Roster format, one student per line (use - to read stdin):
        name,gender,level,exchange
    """
    setup_logging(verbose)

    if legend:
        click.echo(ROSTER_LEGEND, nl=False)
        return
    if roster is None:
        raise click.UsageError("Missing argument 'ROSTER'.")

    try:
        weights = Weights(
            forbid_pair=forbid_pair_weight,
            gender_imbalance=gender_weight,
            level_imbalance=level_weight,
            exchange_imbalance=exchange_weight,
            size_imbalance=size_weight,
        )
        students = parse_students(roster.read())
        if not students:
            console.print("[bold red]❌ No students found in roster.[/bold red]")
            sys.exit(1)

        if not quiet:
            console.print(f"📋 [green]Loaded[/green] [bold]{len(students)}[/bold] [green]students[/green]")

        history = GroupHistory()
        for listing in previous:
            history.accept(parse_groups_text(listing.read(), students))
        if previous and not quiet:
            console.print(f"🔁 [blue]Avoiding pairs from[/blue] [bold]{len(history)}[/bold] [blue]previous round(s)[/blue]")

        rng = np.random.default_rng(seed)
        listings = []
        for round_num in range(1, rounds + 1):
            forbidden = history.forbidden_pairs()
            if quiet:
                result = optimize_with_restarts(
                    students, group_size, forbidden, iterations, weights, rng, restarts
                )
            else:
                with console.status(f"[bold green]Generating round {round_num}..."):
                    result = optimize_with_restarts(
                        students, group_size, forbidden, iterations, weights, rng, restarts
                    )

            text = groups_to_text(result.groups)
            listings.append(text)
            if quiet:
                click.echo(text)
                if round_num < rounds:
                    click.echo()
            else:
                console.print()
                print_groups(console, result.groups, forbidden, group_size, weights,
                             title=f"Round {round_num}")
                console.print(f"Score: [bold]{result.score:g}[/bold]  {status_message(result.score)}")

            history.accept(result.groups)

        if output:
            output.write("\n\n".join(listings) + "\n")
            if not quiet:
                console.print(f"\n💾 [green]Saved group listing to[/green] [cyan]{output.name}[/cyan]")

        if show_stats and not quiet:
            print_statistics(console, history)
        if show_matrix and not quiet:
            print_overlap_matrix(console, history, students)

    except InvalidConfiguration as e:
        console.print(f"[bold red]❌ Error: {e}[/bold red]")
        sys.exit(1)
    except OSError as e:
        console.print(f"[bold red]❌ Error: {e}[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
