"""Build multi-blast job submission bodies from WDK BLAST form parameters."""

__version__ = "0.1.0"
