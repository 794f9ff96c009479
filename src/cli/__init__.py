"""Command line front end for the contacts store."""
