"""Convert grouped portal API descriptions into an OpenAPI path map."""

__version__ = "0.1.0"
