"""Textual front end for Lightning."""
