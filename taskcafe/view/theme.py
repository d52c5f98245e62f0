import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"
DEFAULT_THEME = DARK


class ThemePreference:
    """Light/dark display mode kept in a small client-local JSON file."""

    def __init__(self, path):
        self.path = Path(path)
        self.mode = DEFAULT_THEME

    def load(self) -> str:
        """Apply the stored preference, or the default when there is none."""
        try:
            stored = json.loads(self.path.read_text(encoding="utf-8")).get("theme")
        except FileNotFoundError:
            stored = None
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Ignoring unreadable theme preference %s: %s", self.path, e)
            stored = None

        self.mode = stored if stored in (LIGHT, DARK) else DEFAULT_THEME
        return self.mode

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"theme": self.mode}), encoding="utf-8")

    def toggle(self) -> str:
        self.mode = LIGHT if self.mode == DARK else DARK
        self.save()
        return self.mode
