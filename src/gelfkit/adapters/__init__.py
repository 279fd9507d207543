"""Adapters connecting the conversion core to its collaborators."""
