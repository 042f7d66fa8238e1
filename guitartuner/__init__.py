"""Autocorrelation pitch detection for guitar strings, with an HD44780 display driver."""

__version__ = "1.0.0"