"""HTTP API for Payment Gateway."""
