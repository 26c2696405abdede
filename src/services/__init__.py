"""Ticket workflow services used by the Bolt listeners and Lambda handlers.

Kept import-free so handlers can load the Intercom client lazily.
"""
