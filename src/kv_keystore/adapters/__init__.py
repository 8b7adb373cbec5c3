"""Adapters – concrete KeyStore backends and their transports."""
