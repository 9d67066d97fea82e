"""Plain-text rendering of routes, comparisons and network information.

Every function returns a string and never prints, so the CLI decides where the
output goes and tests can compare text directly.
"""

from typing import List, Optional, Sequence

from .core.graph import FlightGraph
from .core.graph_operations.metrics import NetworkMetrics
from .core.graph_paths.models import Route, RouteComparison
from .core.graph_paths.types import Recommendation

RULE = "-"
DOUBLE_RULE = "="


def format_duration(hours: float) -> str:
    """Render a duration, adding a days/hours breakdown from one day upwards."""
    text = f"{hours:g} hours"
    if hours >= 24:
        text += f" ({int(hours // 24)}d {int(hours) % 24}h)"
    return text


def format_path(route: Route) -> str:
    """Render the city codes of a route joined by arrows."""
    return " -> ".join(route.cities)


def format_route(route: Route, graph: FlightGraph, title: str) -> str:
    """
    Render one route with a line block per flight.

    Args:
        route: The route to render; the empty route renders "No route found!"
        graph: Graph used to look up city display names
        title: Heading shown above the totals

    Returns:
        The rendered text
    """
    if route.is_empty:
        return "\nNo route found!\n"

    lines = [
        "",
        RULE * 70,
        f"  {title}",
        RULE * 70,
        f"Total Cost: ${route.total_cost:.2f}",
        f"Total Duration: {format_duration(route.total_duration)}",
        f"Number of Stops: {route.stops}",
        RULE * 70,
        "",
    ]

    for i, flight in enumerate(route.flights):
        lines.append(f"Flight {i + 1}: {flight.flight_number}")
        lines.append(
            f"   {graph.city_display_name(route.cities[i])} -> "
            f"{graph.city_display_name(flight.destination)}"
        )
        lines.append(f"   Airline: {flight.airline}")
        if flight.departure_time:
            lines.append(
                f"   Departure: {flight.departure_time} | Arrival: {flight.arrival_time}"
            )
        lines.append(f"   Duration: {flight.duration:g}h | Cost: ${flight.cost:.2f}")
        if flight.aircraft:
            aircraft = f"   Aircraft: {flight.aircraft}"
            if flight.seats_available > 0:
                aircraft += f" | Seats: {flight.seats_available}"
            lines.append(aircraft)
        if i < len(route.flights) - 1:
            lines.append("")
            lines.append(f"   Layover at {graph.city_display_name(flight.destination)}")
            lines.append("")

    lines.append(RULE * 70)
    return "\n".join(lines) + "\n"


def format_route_list(routes: Sequence[Route], title: str) -> str:
    """Render a summary block for each of several tied-optimal routes."""
    if not routes:
        return f"\nNo routes found for {title}.\n"

    lines = [
        "",
        DOUBLE_RULE * 60,
        f" ALL OPTIMAL {title} ROUTES ({len(routes)} found)",
        DOUBLE_RULE * 60,
    ]
    for number, route in enumerate(routes, start=1):
        lines.extend(
            [
                "",
                f"--- Route {number}: ---",
                f"   Total Cost: ${route.total_cost:.2f}",
                f"   Total Duration: {route.total_duration:g} hours",
                f"   Total Stops: {route.stops}",
                f"   Path: {format_path(route)}",
            ]
        )
    return "\n".join(lines) + "\n"


def format_pareto_table(routes: Sequence[Route]) -> str:
    """Render the numbered option table of Pareto-optimal routes."""
    if not routes:
        return "\nNo Pareto-optimal routes found!\n"

    lines = [
        "",
        DOUBLE_RULE * 70,
        " PARETO-OPTIMAL ROUTE OPTIONS (Non-Dominated)",
        " (Best compromises between Cost and Duration)",
        DOUBLE_RULE * 70,
        f"{'OPTION':<8}{'TOTAL COST':<15}{'TOTAL DURATION':<20}{'STOPS':<10}",
        RULE * 70,
    ]
    for option, route in enumerate(routes, start=1):
        cost = f"${route.total_cost:.2f}"
        duration = f"{route.total_duration:g} hours"
        lines.append(f"{str(option) + '.':<8}{cost:<15}{duration:<20}{route.stops:<10}")
    lines.append(DOUBLE_RULE * 70)
    return "\n".join(lines) + "\n"


def select_route(routes: Sequence[Route], option: int) -> Optional[Route]:
    """Get a route by its 1-based option number, or None when out of range."""
    if 1 <= option <= len(routes):
        return routes[option - 1]
    return None


def format_recommendation(comparison: RouteComparison) -> str:
    """Render the recommendation line of a comparison."""
    recommendation = comparison.recommendation
    if recommendation == Recommendation.UNAVAILABLE:
        return "Recommendation: Could not find all required routes for comparison."
    if recommendation == Recommendation.CHEAPEST:
        cost = comparison.cheapest[0].total_cost
        return f"Recommendation: Choose Option 1 (Best value for money: ${cost:.2f})"
    if recommendation == Recommendation.FASTEST:
        duration = comparison.fastest[0].total_duration
        return f"Recommendation: Choose Option 2 (Saves significant time: {duration:g} hours)"
    return (
        "Recommendation: The routes are relatively balanced. Consider Option 3 "
        "(Minimum Stops) or Option 4 (Pareto Optimal) for a trade-off decision."
    )


def format_comparison(comparison: RouteComparison, graph: FlightGraph) -> str:
    """Render the cheapest, fastest and minimum-stops results plus a recommendation."""
    parts = [
        format_route_list(comparison.cheapest, "CHEAPEST"),
        format_route_list(comparison.fastest, "FASTEST"),
        format_route(comparison.minimum_stops, graph, "Option 3: MINIMUM STOPS (BFS)"),
        "\n" + format_recommendation(comparison) + "\n",
    ]
    return "".join(parts)


def format_stats(metrics: NetworkMetrics, graph: FlightGraph) -> str:
    """Render network statistics with the top hub cities."""
    lines = [
        "",
        "NETWORK STATISTICS",
        RULE * 40,
        f"Total Cities: {metrics.city_count}",
        f"Total Flights: {metrics.flight_count}",
        f"Average Routes per City: {metrics.average_routes_per_city:.2f}",
        "",
        "Top Hub Cities:",
    ]
    for rank, (code, count) in enumerate(metrics.hub_cities, start=1):
        lines.append(f"   {rank}. {graph.city_display_name(code)} - {count} outbound flights")
    return "\n".join(lines) + "\n"


def format_city_list(graph: FlightGraph) -> str:
    """Render every known city sorted by code."""
    cities = graph.get_cities()
    lines = ["", "AVAILABLE CITIES", RULE * 70]
    lines.extend(f"{city.code:<6} - {city.name}" for city in cities)
    lines.append("")
    lines.append(f"Total: {len(cities)} cities")
    return "\n".join(lines) + "\n"


def format_city(graph: FlightGraph, code: str) -> str:
    """Render the metadata of one city."""
    city = graph.get_city(code)
    if city is None:
        return f"City not found: {code}\n"

    lines = [
        "",
        RULE * 50,
        f"City: {city.display_name}",
        RULE * 50,
        f"Airport: {city.airport_name}",
        f"Country: {city.country}",
        f"Timezone: {city.timezone}",
        f"Coordinates: {city.latitude:g}, {city.longitude:g}",
        RULE * 50,
    ]
    return "\n".join(lines) + "\n"


def format_graph(graph: FlightGraph) -> str:
    """Render the adjacency list of the whole network, origins sorted by code."""
    lines: List[str] = [
        "",
        "--- ENTIRE FLIGHT GRAPH (ADJACENCY LIST) ---",
        "Format: SOURCE -> [Flight_Number] DESTINATION (Duration, Cost, Departure, Arrival)",
    ]
    for origin in sorted(graph.get_origins()):
        flights = graph.get_flights(origin)
        lines.append("")
        lines.append(f"{origin} ({len(flights)} outbound flights):")
        for flight in flights:
            lines.append(
                f"  - [{flight.flight_number}] {flight.destination} "
                f"(Air Time: {flight.duration:.1f}h, Cost: ${flight.cost:.0f}, "
                f"Dep: {flight.departure_time}, Arr: {flight.arrival_time})"
            )
    lines.append("")
    lines.append(RULE * 44)
    return "\n".join(lines) + "\n"
