"""Bridges between UI toolkits and the keymap resolver."""
