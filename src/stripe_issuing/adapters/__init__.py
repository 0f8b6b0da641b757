"""Adapters: HTTP transport, wire encoding and resource bindings."""
