"""Shared test configuration."""

import matplotlib

# Render tests draw off-screen
matplotlib.use("Agg")
