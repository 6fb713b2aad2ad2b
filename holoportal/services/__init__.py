"""Device portal HTTP services."""
