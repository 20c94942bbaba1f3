"""Framework adapters serving exporter endpoints."""
