"""Target adapters."""
