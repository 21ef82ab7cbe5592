"""Shared utilities and telemetry."""
