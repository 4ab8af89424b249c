"""Reservations backend for the Senderos Amados lodging."""

__version__ = "1.0.0"
