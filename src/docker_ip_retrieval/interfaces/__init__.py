"""Interfaces layer."""
