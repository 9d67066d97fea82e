"""
Tests for the command line interface.
"""

from typing import Iterable, List

import pytest

from skyroute import cli


class ScriptedInput:
    """Replays scripted answers, then signals end of input."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def run(data_files, *args, answers=()):
    cities_path, flights_path = data_files
    output: List[str] = []
    status = cli.main(
        ["--cities", cities_path, "--flights", flights_path, *args],
        input_func=ScriptedInput(answers),
        output=output.append,
    )
    return status, "\n".join(output)


def test_cheapest_command(data_files):
    """Test the cheapest subcommand."""
    status, text = run(data_files, "cheapest", "khi", "lhr")

    assert status == 0
    assert "ALL OPTIMAL CHEAPEST ROUTES (1 found)" in text
    assert "Path: KHI -> DXB -> LHR" in text
    assert "Total Cost: $650.00" in text


def test_fastest_command(data_files):
    """Test the fastest subcommand."""
    status, text = run(data_files, "fastest", "KHI", "LHR")

    assert status == 0
    assert "Path: KHI -> LHR" in text


def test_min_stops_command(data_files):
    """Test the min-stops subcommand."""
    status, text = run(data_files, "min-stops", "KHI", "LHR")

    assert status == 0
    assert "MINIMUM STOPS ROUTE (BFS)" in text
    assert "Flight 1: PK785" in text


def test_pareto_command_with_option(data_files):
    """Test the pareto subcommand with option details."""
    status, text = run(data_files, "pareto", "KHI", "LHR", "--option", "2")

    assert status == 0
    assert "PARETO-OPTIMAL ROUTE OPTIONS" in text
    assert "PARETO OPTIMAL ROUTE (Option 2)" in text
    assert "Flight 1: PK785" in text


def test_pareto_command_invalid_option(data_files):
    """Test the pareto subcommand with an out-of-range option."""
    status, text = run(data_files, "pareto", "KHI", "LHR", "--option", "9")

    assert status == 0
    assert "Invalid option." in text


def test_compare_command(data_files):
    """Test the compare subcommand."""
    status, text = run(data_files, "compare", "KHI", "LHR")

    assert status == 0
    assert "relatively balanced" in text


def test_unreachable_route(data_files):
    """Test a query without any route."""
    status, text = run(data_files, "cheapest", "LHR", "KHI")

    assert status == 0
    assert "No routes found for CHEAPEST." in text


@pytest.mark.parametrize(
    "args, expected",
    [
        (["stats"], "Total Flights: 3"),
        (["cities"], "Total: 3 cities"),
        (["city", "dxb"], "City: Dubai (DXB)"),
        (["graph"], "KHI (2 outbound flights):"),
    ],
)
def test_info_commands(data_files, args, expected):
    """Test the network information subcommands."""
    status, text = run(data_files, *args)

    assert status == 0
    assert expected in text


def test_missing_data_file(tmp_path, capsys):
    """Test that a missing data file exits with an error."""
    missing = str(tmp_path / "none.json")
    status = cli.main(["--cities", missing, "--flights", missing, "stats"])

    assert status == 1
    assert "Failed to load network data" in capsys.readouterr().err


def test_invalid_configuration(data_files, capsys):
    """Test that invalid search options exit with an error."""
    status, _ = run(data_files, "--max-paths", "0", "cheapest", "KHI", "LHR")

    assert status == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_interactive_session(data_files):
    """Test a scripted interactive session."""
    status, text = run(
        data_files,
        "interactive",
        answers=["1", "khi", "lhr", "7", "0"],
    )

    assert status == 0
    assert "NETWORK STATISTICS" in text
    assert "AIRLINE BOOKING SYSTEM" in text
    assert "Searching for routes from KHI to LHR..." in text
    assert "Path: KHI -> DXB -> LHR" in text
    assert "AVAILABLE CITIES" in text
    assert "Safe travels!" in text


def test_interactive_is_default(data_files):
    """Test that the interactive session runs without a subcommand."""
    status, text = run(data_files, answers=["0"])

    assert status == 0
    assert "Safe travels!" in text


def test_interactive_pareto_option(data_files):
    """Test choosing a Pareto option interactively."""
    _, text = run(data_files, answers=["4", "KHI", "LHR", "1", "0"])

    assert "PARETO OPTIMAL ROUTE (Option 1)" in text
    assert "Flight 1: EK601" in text


def test_interactive_invalid_inputs(data_files):
    """Test invalid menu choices and Pareto options."""
    _, text = run(data_files, answers=["x", "4", "KHI", "LHR", "abc", "0"])

    assert "Invalid choice! Please try again." in text
    assert "Invalid option." in text


def test_interactive_city_lookup(data_files):
    """Test the city information menu choice."""
    _, text = run(data_files, answers=["8", "lhr", "0"])
    assert "City: London (LHR)" in text


def test_interactive_ends_on_end_of_input(data_files):
    """Test that exhausted input ends the session cleanly."""
    status, text = run(data_files, answers=["6"])

    assert status == 0
    assert "Safe travels!" not in text


def test_interactive_session_direct(triangle_graph):
    """Test driving the session object without data files."""
    output: List[str] = []
    session = cli.InteractiveSession(
        triangle_graph, input_func=ScriptedInput(["3", "A", "B", "0"]), output=output.append
    )
    session.run()

    text = "\n".join(output)
    assert "MINIMUM STOPS ROUTE (BFS)" in text
    assert "Flight 1: AB1" in text
