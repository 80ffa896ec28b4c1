"""Infrastructure services (logging and other ambient concerns)."""
