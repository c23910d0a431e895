"""Entrypoints (inbound adapters) for the bookstore.

Expose the application to the outside world: CLI commands. Parse and validate
inputs, call service-layer operations, and present results.

Dependency rule: may import `bookstore.service_layer` and `bookstore.bootstrap`;
avoid importing `bookstore.adapters` directly.
"""
