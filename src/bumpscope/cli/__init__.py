"""Command line interface for bumpscope."""
