"""Reference datasets (month-length tables and anchors)."""
