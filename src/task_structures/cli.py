"""Command-line interface for exploring the example trees and to-do heap."""

import logging
from datetime import datetime
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree as RichTree

from .config import DisplayConfig
from .examples import TREES, todo_list
from .formatting import describe_task, format_date, format_value
from .task_heap import TaskNode
from .tree_node import Tree, TreeNode

app = typer.Typer(help="Task Structures - trees and task heaps on the console")
console = Console()

logger = logging.getLogger("task-structures")


class TreeChoice(str, Enum):
    """Available example trees."""
    FAMILY = "family"
    NUMBERS = "numbers"
    FLAGS = "flags"


def get_config(marker: Optional[str] = None, date_format: Optional[str] = None) -> DisplayConfig:
    """Get display config from the environment, with CLI overrides."""
    return DisplayConfig.from_env(depth_marker=marker, date_format=date_format)


def build_rich_tree(tree: Tree) -> RichTree:
    """Convert a tree into a rich renderable."""

    def add_children(node: TreeNode, branch: RichTree) -> None:
        for child in node.children:
            style = "green" if child.is_leaf() else "bold"
            add_children(child, branch.add(Text(format_value(child.data), style=style)))

    rich_tree = RichTree(Text(format_value(tree.root.data), style="bold magenta"))
    add_children(tree.root, rich_tree)
    return rich_tree


def format_task_line(task: TaskNode, config: DisplayConfig, now: datetime) -> Text:
    """Format a task with a red highlight when it is overdue."""
    style = "red" if task.is_late(now) else "white"
    return Text(describe_task(task, now, config), style=style)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (DEBUG, INFO, ...)")
):
    """Configure logging before running a command."""
    config = DisplayConfig.from_env(log_level=log_level)
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        console.print(f"[red]Error: Unknown log level {config.log_level}[/red]")
        raise typer.Exit(1)

    logging.basicConfig(level=level)
    logger.debug("Log level set to %s", config.log_level.upper())


@app.command()
def tree(
    which: TreeChoice = typer.Option(TreeChoice.FAMILY, "--which", "-w", help="Example tree to show"),
    marker: Optional[str] = typer.Option(None, "--marker", "-m", help="Depth marker"),
    use_rich: bool = typer.Option(False, "--rich", help="Draw with rich tree guides"),
    find: Optional[str] = typer.Option(None, "--find", "-f", help="Value to look up"),
):
    """Show an example tree and its traversals."""
    config = get_config(marker=marker)
    example = TREES[which.value]()
    example.validate()

    if use_rich:
        console.print(build_rich_tree(example))
    else:
        console.print(example.render(config.depth_marker), markup=False, highlight=False)

    console.print()
    console.print(f"[bold]Depth-first:[/bold] {' '.join(format_value(v) for v in example.depth_first_traversal())}")
    console.print(f"[bold]Breadth-first:[/bold] {' '.join(format_value(v) for v in example.breadth_first_traversal())}")
    console.print(f"[dim]{example.size()} nodes, height {example.height()}[/dim]")

    if find is not None:
        match = example.find_value(find)
        if match is None and which == TreeChoice.NUMBERS:
            try:
                match = example.find_value(int(find))
            except ValueError:
                match = None

        if match is None:
            console.print(f"[yellow]{find} not found[/yellow]")
            raise typer.Exit(1)

        path = " -> ".join(format_value(node.data) for node in match.lineage())
        console.print(f"[green]Found:[/green] {path}")


@app.command()
def todo(
    finish: int = typer.Option(0, "--finish", "-n", min=0, help="Number of tasks to finish"),
    date_format: Optional[str] = typer.Option(None, "--date-format", help="strftime pattern for due dates"),
    show_table: bool = typer.Option(False, "--table", help="Show storage as a table"),
):
    """Show the example to-do list ordered by due date."""
    config = get_config(date_format=date_format)
    heap = todo_list()
    now = datetime.now()

    if show_table:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Task", style="bold")
        table.add_column("Due", justify="center")
        for number, task in enumerate(heap.tasks(), start=1):
            style = "red" if task.is_late(now) else "white"
            table.add_row(str(number), Text(task.task, style=style), format_date(task.due_date, config.date_format))
        console.print(table)
    else:
        console.print(heap.describe(now, config), markup=False, highlight=False)

    next_task = heap.peek()
    if next_task is None:
        console.print("[green]Your task list is empty, good job![/green]")
        return
    console.print(Panel(format_task_line(next_task, config, now), title="Your next task"))

    for _ in range(finish):
        done = heap.extract_min()
        if done is None:
            console.print("[yellow]There are no tasks left to complete.[/yellow]")
            break
        console.print(Text.assemble("Removing: ", format_task_line(done, config, now)))

    if finish:
        console.print(f"[dim]Total outstanding tasks: {heap.size}[/dim]")


if __name__ == "__main__":
    app()
