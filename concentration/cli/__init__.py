"""Command line and terminal front-ends for Concentration."""
