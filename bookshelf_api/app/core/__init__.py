"""Configuration, logging, errors, messages and the in‑memory store."""
