"""Route document loading."""

from flightpath.dsl.loader import RouteDocument, load_routes_file, load_routes_yaml

__all__ = ["RouteDocument", "load_routes_file", "load_routes_yaml"]
