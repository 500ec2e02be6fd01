"""Outer surfaces for linematch: Flask API (web) and command line (__main__)."""
