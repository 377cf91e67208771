"""
Copyright field semantics used by the editor's metadata form.
"""

from __future__ import annotations

from typing import Any

LICENSES: tuple[tuple[str, str], ...] = (
    ("U", "Undisclosed"),
    ("CC BY", "Attribution"),
    ("CC BY-SA", "Attribution-ShareAlike"),
    ("CC BY-ND", "Attribution-NoDerivs"),
    ("CC BY-NC", "Attribution-NonCommercial"),
    ("CC BY-NC-SA", "Attribution-NonCommercial-ShareAlike"),
    ("CC BY-NC-ND", "Attribution-NonCommercial-NoDerivs"),
    ("GNU GPL", "General Public License v3"),
    ("PD", "Public Domain"),
    ("ODC PDDL", "Public Domain Dedication and Licence"),
    ("CC PDM", "Public Domain Mark"),
    ("C", "Copyright"),
)

COPYRIGHT_SEMANTICS: dict[str, Any] = {
    "name": "copyright",
    "type": "group",
    "label": "Copyright information",
    "fields": [
        {"name": "title", "type": "text", "label": "Title", "placeholder": "La Gioconda", "optional": True},
        {"name": "author", "type": "text", "label": "Author", "placeholder": "Leonardo da Vinci", "optional": True},
        {"name": "year", "type": "text", "label": "Year(s)", "placeholder": "1503 - 1517", "optional": True},
        {
            "name": "source",
            "type": "text",
            "label": "Source",
            "placeholder": "http://en.wikipedia.org/wiki/Mona_Lisa",
            "optional": True,
            "regexp": {"pattern": "^http[s]?://.+", "modifiers": "i"},
        },
        {
            "name": "license",
            "type": "select",
            "label": "License",
            "default": "U",
            "options": [{"value": value, "label": label} for value, label in LICENSES],
        },
    ],
}
