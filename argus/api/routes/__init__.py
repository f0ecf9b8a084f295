"""HTTP routes for the Argus workflow API."""
