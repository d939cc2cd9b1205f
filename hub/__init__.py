"""Stemcell hub: read-mostly release and stemcell metadata service."""

__version__ = "0.1.0"
