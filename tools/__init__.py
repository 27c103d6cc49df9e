"""Galaxy presets and helpers."""
