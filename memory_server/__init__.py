"""Matching-pairs memory game: engine, session layer and API server."""
