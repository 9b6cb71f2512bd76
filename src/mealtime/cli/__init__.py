"""Command line interface for mealtime."""
