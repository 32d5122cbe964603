"""Built-in phrase sets used when nothing has been saved yet."""
from __future__ import annotations

from .phrase import Phrase, new_phrase

DIRECTIONS_SECTION_TITLE = "\U0001f9ed Directions"

# (label, translation, pronunciation) in display order.
DEFAULT_DIRECTIONS: tuple[tuple[str, str, str], ...] = (
    ("Left", "Sinistra", "See-nee-strah"),
    ("Right", "Destra", "Deh-strah"),
    ("Straight", "Dritto", "Dree-toh"),
    ("Turn", "Gira", "Jee-rah"),
    ("Stop", "Fermati", "Fehr-mah-tee"),
    ("Go", "Vai", "Vye"),
    ("Slow down", "Rallenta", "Rahl-lehn-tah"),
    ("Speed limit", "Limite di velocità", "Lee-mee-teh dee veh-loh-chee-tah"),
    ("Up", "Su", "Soo"),
    ("Down", "Giù", "Joo"),
)


def default_directions() -> list[Phrase]:
    """Return the default directions with freshly generated ids."""
    return [
        new_phrase(label, translation, pronunciation)
        for label, translation, pronunciation in DEFAULT_DIRECTIONS
    ]
