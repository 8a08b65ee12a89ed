"""Adapters connecting playhub to catalogs, persistence and the audio session."""
