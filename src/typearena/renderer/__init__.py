"""Drawing helpers for the pygame front-end."""
