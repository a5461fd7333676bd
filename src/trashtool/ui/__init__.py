"""Presentation helpers for the command line — listing, colours, prompts."""
