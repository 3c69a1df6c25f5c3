"""Switch every widget kind to the high-contrast palette at once."""

from __future__ import annotations

from novadesk import button, label, listwidget


def set_high_contrast_mode(enabled: bool) -> None:
    """Turn high-contrast rendering on or off for labels, lists and buttons."""
    label.set_high_contrast(enabled)
    listwidget.set_high_contrast(enabled)
    button.set_high_contrast(enabled)