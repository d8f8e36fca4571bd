"""Command line front end for the chess image renderer."""
