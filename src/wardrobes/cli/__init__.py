"""Command line interface for the wardrobe intent pipeline."""
