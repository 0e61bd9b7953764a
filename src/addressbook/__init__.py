"""ADDRESSBOOK

Contact affiliations for a personal address book: validated, immutable
affiliation values and the unique, mergeable list that holds them.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
