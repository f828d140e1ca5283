"""Rocket.Chat facade: a simplified REST interface over the Rocket.Chat API."""
