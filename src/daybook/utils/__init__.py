"""Internal helpers for daybook."""
