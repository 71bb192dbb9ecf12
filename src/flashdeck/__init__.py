"""flashdeck -- study cards from headerless two-column CSV files."""

__version__ = '0.1.0'
