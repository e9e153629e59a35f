"""Tests for the Daikin Local integration."""
