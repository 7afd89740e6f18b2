class SquaregameError(Exception):
    """Base exception for the squaregame core."""
    pass


class InsufficientPaletteError(SquaregameError, ValueError):
    """Raised when a palette holds too few colors to pair the requested tile count."""

    def __init__(self, tile_count: int, required: int, available: int):
        self.tile_count = tile_count
        self.required = required
        self.available = available
        super().__init__(
            f"{tile_count} tiles need {required} distinct colors, palette has {available}"
        )


class ConfigurationError(SquaregameError, ValueError):
    """Raised when a GameConfig holds values the controller cannot run with."""
    pass
