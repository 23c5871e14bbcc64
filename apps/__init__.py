"""Poller applications."""
