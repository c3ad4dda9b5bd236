"""Test package for the Sports Roster API."""
