"""Project ecosystem detection and version bumping."""
