"""Text-menu food ordering marketplace backed by flat JSON files."""
