# -*- coding: utf-8 -*-
"""
Created on Tue Oct  6 08:41:05 2026

Console messages of the inverters. Every line carries the tag [EQMOM] so
that messages of many inverters in a host solver can be filtered.
"""
import sys
import time

TAG = "[EQMOM]"
COLORS = {
    "info": "\033[94m",
    "config": "\033[96m",
    "warning": "\033[93m",
    "error": "\033[91m",
}
RESET = "\033[0m"

def format_highlighted(message, title="INFO", timestamp=True):
    """
    Build a tagged console line. The message is colored by its title
    (INFO, CONFIG, WARNING, ERROR); other titles are printed without color.

    Parameters:
        message (str): The message.
        title (str, optional): Kind of message.
        timestamp (bool, optional): Whether to prefix the local time.

    Returns:
        str: The formatted line.
    """
    prefix = time.strftime("%H:%M:%S ") if timestamp else ""
    title = title.upper()
    color = COLORS.get(title.lower())
    if color is None:
        return f"{prefix}{TAG}[{title}] {message}"
    return f"{prefix}{TAG}[{title}] {color}{message}{RESET}"

def print_highlighted(message, title="INFO", timestamp=True):
    """Print a line built by format_highlighted, warnings and errors to stderr."""
    stream = sys.stderr if title.upper() in ("WARNING", "ERROR") else sys.stdout
    print(format_highlighted(message, title=title, timestamp=timestamp), file=stream)
