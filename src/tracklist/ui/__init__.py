"""User interfaces for tracklist."""
