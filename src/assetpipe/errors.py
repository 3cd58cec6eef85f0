"""assetpipe exception hierarchy.

Shared across the registry, the options and the middleware so every
module raises and catches the same types.
"""


class AssetPipeError(Exception):
    """Base for all assetpipe-specific errors."""


class ConfigurationError(AssetPipeError):
    """Raised when an asset, the registry or the options are invalid.

    Always raised at construction or registration time, never while
    serving a request.
    """


class DuplicateRouteError(ConfigurationError):
    """A second asset was registered for a route already taken."""

    def __init__(self, route: str) -> None:
        self.route = route
        super().__init__(f"An asset is already registered for route {route!r}")
