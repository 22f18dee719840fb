"""Loading asset files from disk or from a zip archive."""