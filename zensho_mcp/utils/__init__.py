"""Utility helpers for the Zensho MCP bridge."""
