"""ScaleCLI: note parsing and rendering for scale conversion and chord generation."""

__version__ = "0.1.0"
