"""Slack Bolt wiring: app factory, listeners and the ticket modal."""
