"""Case-management presentation controllers for a foster-care agency."""

__version__ = "0.1.0"
