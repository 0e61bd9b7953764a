"""Adapters that connect the affiliation domain to the outside world."""
