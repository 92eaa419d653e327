"""Test-suite integration."""
