"""Building blocks for the Steam network: wire structures, channel crypto, framed TCP connections and community inventories."""

__version__ = "0.1.0"