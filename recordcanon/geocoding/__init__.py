"""Geocoding-backed address validation.

Optional, network-dependent alternative to the local address
canonicalizer; falls back to it when the provider cannot answer.
"""
