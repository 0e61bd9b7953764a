"""ADDRESSBOOK command-line interface."""
