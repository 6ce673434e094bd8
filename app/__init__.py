"""The Diamond Scheduler API."""
