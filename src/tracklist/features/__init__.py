"""Feature packages for tracklist."""
