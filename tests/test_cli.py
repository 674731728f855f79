# tests/test_cli.py

import pytest
from typer.testing import CliRunner

from task_structures.cli import app
from task_structures.examples import TREES, family_tree, number_tree, todo_list

runner = CliRunner()


@pytest.mark.parametrize("name", sorted(TREES))
def test_example_trees_are_valid(name: str) -> None:
    tree = TREES[name]()
    tree.validate()
    assert len(tree.depth_first_traversal()) == len(tree.breadth_first_traversal()) == tree.size()


def test_example_tree_shapes() -> None:
    assert family_tree().size() == 12
    assert number_tree().breadth_first_traversal() == [54, 33, 32, 27, 12, 10, 6, 1, 2, 5, 3, 1]


def test_example_todo_list() -> None:
    heap = todo_list()

    assert heap.size == 11
    assert heap.is_valid()
    assert heap.peek().task == "Finish Lesson on Algorithms"


def test_tree_command_prints_depth_markers() -> None:
    result = runner.invoke(app, ["tree"])

    assert result.exit_code == 0
    assert "Tracy" in result.output
    assert "--|--|--|Flora the Puppy" in result.output
    assert "Breadth-first:" in result.output


def test_tree_command_custom_marker_and_rich() -> None:
    result = runner.invoke(app, ["tree", "--which", "numbers", "--marker", ".."])
    assert result.exit_code == 0
    assert "....12" in result.output

    result = runner.invoke(app, ["tree", "--which", "numbers", "--rich"])
    assert result.exit_code == 0
    assert "54" in result.output


def test_tree_command_find() -> None:
    result = runner.invoke(app, ["tree", "--find", "Flora the Puppy"])
    assert result.exit_code == 0
    assert "Tracy -> Spencer -> Sansa the Dog -> Flora the Puppy" in result.output

    result = runner.invoke(app, ["tree", "--which", "numbers", "--find", "2"])
    assert result.exit_code == 0
    assert "54 -> 32 -> 2" in result.output

    result = runner.invoke(app, ["tree", "--find", "Poe"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_todo_command() -> None:
    result = runner.invoke(app, ["todo"])

    assert result.exit_code == 0
    assert "Total outstanding tasks: 11" in result.output
    assert "LATE: Finish Lesson on Algorithms, Due: 03/22/2000 13:45" in result.output


def test_todo_command_finishes_tasks() -> None:
    result = runner.invoke(app, ["todo", "--finish", "12"])

    assert result.exit_code == 0
    assert result.output.count("Removing:") == 11
    assert "There are no tasks left to complete." in result.output
    assert "Total outstanding tasks: 0" in result.output


def test_todo_command_table() -> None:
    result = runner.invoke(app, ["todo", "--table", "--date-format", "%Y-%m-%d"])

    assert result.exit_code == 0
    assert "2000-03-22" in result.output


def test_invalid_log_level() -> None:
    result = runner.invoke(app, ["--log-level", "LOUD", "tree"])

    assert result.exit_code == 1
