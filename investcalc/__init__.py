"""Investment calculators served over a small Flask JSON API."""

__version__ = "0.1.0"
