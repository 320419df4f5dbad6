"""Frontend preferences persisted between sessions.

Only remembers whether the player has already been shown the rules; the
puzzle itself is never saved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Preferences:
    seen_rules: bool = False


class PreferencesStore:
    """Loads and saves :class:`Preferences` from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self.preferences = self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> Preferences:
        if not self.filepath.exists():
            logger.debug("Preferences file %s not found, using defaults", self.filepath)
            return Preferences()
        try:
            data = json.loads(self.filepath.read_text())
            return Preferences(seen_rules=bool(data.get("seen_rules", False)))
        except (json.JSONDecodeError, OSError, AttributeError) as e:
            logger.warning("Failed to load preferences from %s: %s", self.filepath, e)
            return Preferences()

    def save(self) -> None:
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self.filepath.write_text(json.dumps(asdict(self.preferences), indent=2) + "\n")
        except OSError as e:
            logger.error("Failed to save preferences to %s: %s", self.filepath, e)

    # -- first visit ----------------------------------------------------------

    @property
    def first_visit(self) -> bool:
        return not self.preferences.seen_rules

    def mark_rules_seen(self) -> None:
        if self.preferences.seen_rules:
            return
        self.preferences.seen_rules = True
        self.save()
