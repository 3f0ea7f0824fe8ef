"""Hosts that feed command lines to the core and show its responses."""
