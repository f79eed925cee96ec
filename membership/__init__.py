"""Membership registry service."""
