"""Core domain: models, ports, aggregation and metric helpers."""
