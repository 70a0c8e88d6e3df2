"""Video companion: stable video metadata from upstream player responses."""
