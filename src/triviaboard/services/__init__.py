"""Board acquisition and game services."""
