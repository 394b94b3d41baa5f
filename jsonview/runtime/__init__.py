"""Viewer session state, actions and the interactive loop."""
