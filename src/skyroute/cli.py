"""Command Line Interface for the SkyRoute flight route finder.

This module loads the flight network from JSON data files and answers route
queries either as one-shot subcommands or through an interactive menu.

The CLI supports the following commands:
    - cheapest: All routes tied for the lowest total cost
    - fastest: All routes tied for the lowest total duration
    - min-stops: One route with the fewest flights
    - pareto: Every non-dominated (cost, duration) route
    - compare: Cheapest, fastest and minimum-stops side by side, with a recommendation
    - stats: Network statistics and hub cities
    - cities: List of all cities
    - city: Details of one city
    - graph: The whole adjacency list
    - interactive: Menu-driven session (the default when no command is given)

Example Usage:
    skyroute cheapest KHI LHR
    skyroute --cities data/cities.json --flights data/flights.json pareto KHI JFK --option 1
    python -m skyroute
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from skyroute.core.config import SearchConfig
from skyroute.core.exceptions import ConfigurationError, GraphOperationError, LoadError
from skyroute.core.graph import FlightGraph
from skyroute.core.graph_operations.metrics import NetworkMetricsCalculator
from skyroute.core.graph_paths import RouteFinding
from skyroute.core.loader import GraphLoader
from skyroute import report

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

ROUTE_COMMANDS = ("cheapest", "fastest", "min-stops", "pareto", "compare")

MENU = """
--------------------------------------------------
|      AIRLINE BOOKING SYSTEM                     |
--------------------------------------------------
1. Search Flights (Cheapest Route)
2. Search Flights (Fastest Route)
3. Search Flights (Minimum Stops)
4. Search Flights (Pareto-Optimal Routes)
5. Compare All Three Optimal Options
6. Display Network Stats
7. List All Cities
8. City Information
9. Display ENTIRE Flight Graph
0. Exit
------------------------------------------------"""

GOODBYE = "\nThank you for using Smart Airline Route Finder!\nSafe travels!\n"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="skyroute", description="Multi-criteria flight route finder"
    )
    parser.add_argument("--cities", default="cities.json", help="Path to the cities data file")
    parser.add_argument("--flights", default="flights.json", help="Path to the flights data file")
    parser.add_argument("--epsilon", type=float, help="Tie tolerance for cheapest/fastest search")
    parser.add_argument("--max-paths", type=int, help="Maximum number of routes per query")
    parser.add_argument("--max-memory-mb", type=float, help="Memory growth limit per search")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    for name, help_text in (
        ("cheapest", "Find all cheapest routes"),
        ("fastest", "Find all fastest routes"),
        ("min-stops", "Find the route with the fewest flights"),
        ("pareto", "Find all Pareto-optimal routes"),
        ("compare", "Compare cheapest, fastest and minimum-stops routes"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("source", help="Departure city code")
        command.add_argument("destination", help="Arrival city code")
        if name == "pareto":
            command.add_argument(
                "--option", type=int, default=0, help="Show full details of this option"
            )

    subparsers.add_parser("stats", help="Display network statistics")
    subparsers.add_parser("cities", help="List all cities")
    city = subparsers.add_parser("city", help="Display city information")
    city.add_argument("code", help="City code")
    subparsers.add_parser("graph", help="Display the entire flight graph")
    subparsers.add_parser("interactive", help="Start the interactive menu")

    return parser


def configure_logging(verbose: bool) -> None:
    """Set up root logging for the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> SearchConfig:
    """Build the search configuration from command-line overrides."""
    return SearchConfig().with_overrides(
        epsilon=args.epsilon,
        max_paths=args.max_paths,
        max_memory_mb=args.max_memory_mb,
    )


def render_pareto(graph: FlightGraph, routes, option: int) -> str:
    """Render the Pareto table and, for a non-zero option, that option's details."""
    text = report.format_pareto_table(routes)
    if not routes or option == 0:
        return text

    route = report.select_route(routes, option)
    if route is None:
        return text + "Invalid option.\n"
    return text + report.format_route(route, graph, f"PARETO OPTIMAL ROUTE (Option {option})")


def run_route_command(
    command: str,
    graph: FlightGraph,
    source: str,
    destination: str,
    config: SearchConfig,
    option: int = 0,
) -> str:
    """Run one route query and return its rendered result."""
    if command == "cheapest":
        return report.format_route_list(
            RouteFinding.cheapest_routes(graph, source, destination, config), "CHEAPEST"
        )
    if command == "fastest":
        return report.format_route_list(
            RouteFinding.fastest_routes(graph, source, destination, config), "FASTEST"
        )
    if command == "min-stops":
        return report.format_route(
            RouteFinding.minimum_stops_route(graph, source, destination, config),
            graph,
            "MINIMUM STOPS ROUTE (BFS)",
        )
    if command == "pareto":
        routes = RouteFinding.pareto_optimal_routes(graph, source, destination, config)
        return render_pareto(graph, routes, option)
    if command == "compare":
        comparison = RouteFinding.compare_routes(graph, source, destination, config)
        return report.format_comparison(comparison, graph)
    raise ValueError(f"Unknown route command: {command}")


def run_info_command(command: str, graph: FlightGraph, code: Optional[str] = None) -> str:
    """Run one network information command and return its rendered result."""
    if command == "stats":
        return report.format_stats(NetworkMetricsCalculator(graph).calculate(), graph)
    if command == "cities":
        return report.format_city_list(graph)
    if command == "city":
        return report.format_city(graph, (code or "").strip().upper())
    if command == "graph":
        return report.format_graph(graph)
    raise ValueError(f"Unknown command: {command}")


class InteractiveSession:
    """
    Menu-driven session over a loaded network.

    Input and output are injectable so the session can be driven by tests.
    The session ends on choice 0 or when input is exhausted.
    """

    ROUTE_CHOICES = {
        "1": "cheapest",
        "2": "fastest",
        "3": "min-stops",
        "4": "pareto",
        "5": "compare",
    }
    INFO_CHOICES = {"6": "stats", "7": "cities", "8": "city", "9": "graph"}

    def __init__(
        self,
        graph: FlightGraph,
        config: Optional[SearchConfig] = None,
        input_func: InputFunc = input,
        output: OutputFunc = print,
    ):
        self.graph = graph
        self.config = config or SearchConfig()
        self.input_func = input_func
        self.output = output

    def run(self) -> None:
        """Show the menu until the user exits."""
        metrics = NetworkMetricsCalculator(self.graph).calculate()
        self.output(report.format_stats(metrics, self.graph))
        try:
            while True:
                self.output(MENU)
                choice = self.input_func("Enter choice: ").strip()
                if choice == "0":
                    self.output(GOODBYE)
                    return
                self.handle_choice(choice)
        except EOFError:
            logger.debug("Input exhausted, ending interactive session")

    def handle_choice(self, choice: str) -> None:
        """Run a single menu choice."""
        if choice in self.ROUTE_CHOICES:
            source = self.input_func("\nEnter source city code (e.g., KHI, ISB, LHE): ")
            destination = self.input_func("Enter destination city code (e.g., LHR, DXB, JFK): ")
            source = source.strip().upper()
            destination = destination.strip().upper()
            self.output(f"\nSearching for routes from {source} to {destination}...")
            self.run_route_choice(self.ROUTE_CHOICES[choice], source, destination)
        elif choice in self.INFO_CHOICES:
            command = self.INFO_CHOICES[choice]
            code = self.input_func("\nEnter city code: ") if command == "city" else None
            self.output(run_info_command(command, self.graph, code))
        else:
            self.output("\nInvalid choice! Please try again.")

    def run_route_choice(self, command: str, source: str, destination: str) -> None:
        try:
            if command == "pareto":
                routes = RouteFinding.pareto_optimal_routes(
                    self.graph, source, destination, self.config
                )
                self.output(report.format_pareto_table(routes))
                if routes:
                    self.prompt_pareto_option(routes)
            else:
                self.output(
                    run_route_command(command, self.graph, source, destination, self.config)
                )
        except (GraphOperationError, MemoryError) as e:
            logger.error(f"Search from {source} to {destination} failed: {e}")
            self.output(f"Search failed: {e}")

    def prompt_pareto_option(self, routes) -> None:
        answer = self.input_func(
            "\nEnter option number for full details, or 0 to return to menu: "
        ).strip()
        try:
            option = int(answer)
        except ValueError:
            option = -1

        if option == 0:
            return
        route = report.select_route(routes, option)
        if route is None:
            self.output("Invalid option.")
        else:
            self.output(
                report.format_route(route, self.graph, f"PARETO OPTIMAL ROUTE (Option {option})")
            )


def main(
    argv: Optional[List[str]] = None,
    input_func: InputFunc = input,
    output: OutputFunc = print,
) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        graph = GraphLoader().load_graph(args.cities, args.flights)
    except LoadError as e:
        print(f"Failed to load network data: {e}", file=sys.stderr)
        return 1

    command = args.command or "interactive"
    if command == "interactive":
        InteractiveSession(graph, config, input_func, output).run()
        return 0

    try:
        if command in ROUTE_COMMANDS:
            text = run_route_command(
                command,
                graph,
                args.source,
                args.destination,
                config,
                option=getattr(args, "option", 0),
            )
        else:
            text = run_info_command(command, graph, getattr(args, "code", None))
    except (GraphOperationError, MemoryError) as e:
        print(f"Search failed: {e}", file=sys.stderr)
        return 1

    output(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
