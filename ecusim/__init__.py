"""Simulated automotive ECU stacks for headlight control and vehicle state sensing, with diagnostic services."""

__version__ = "0.1.0"