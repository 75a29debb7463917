"""Text transforms applied to note content."""
