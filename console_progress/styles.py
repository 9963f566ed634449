"""Color tokens for progress bar segments."""

from enum import Enum

from console_progress.exceptions import InvalidConfiguration


class Color(Enum):
    """Classic console colors, valued by their rich color names."""

    DEFAULT = "default"  # whatever the terminal background is
    BLACK = "black"
    DARK_BLUE = "blue"
    DARK_GREEN = "green"
    DARK_CYAN = "cyan"
    DARK_RED = "red"
    DARK_MAGENTA = "magenta"
    DARK_YELLOW = "yellow"
    GRAY = "white"
    DARK_GRAY = "bright_black"
    BLUE = "bright_blue"
    GREEN = "bright_green"
    CYAN = "bright_cyan"
    RED = "bright_red"
    MAGENTA = "bright_magenta"
    YELLOW = "bright_yellow"
    WHITE = "bright_white"

    @classmethod
    def parse(cls, name: str) -> "Color":
        """
        Look up a color by name.

        Accepts "dark_blue", "DarkBlue", "dark-blue" and so on.

        Args:
            name: Color name

        Returns:
            Matching Color
        """
        key = name.strip().replace("_", "").replace("-", "").replace(" ", "").upper()
        for color in cls:
            if color.name.replace("_", "") == key:
                return color
        raise InvalidConfiguration(f"Unknown color: {name!r}")
