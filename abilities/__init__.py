"""Abilities — the network-facing lookups behind the widget."""
