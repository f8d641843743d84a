"""
Tests for the IDS Traffic Monitor
"""
