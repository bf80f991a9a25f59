"""Shared pytest configuration."""

import matplotlib

# Headless: no window ever opens during tests
matplotlib.use("Agg")
