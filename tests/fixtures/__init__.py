"""Shared payloads and HTTP transport doubles for Mapbox client tests."""
