"""Domain layer for bankdash application."""
