"""
BioRecord exposes annotated sequence records (NCBI GBSeq XML) as lightweight views over the parsed document,
and resolves feature intervals into frame-annotated, strand-aware sequence extracts.
"""

__version__ = "0.1.0"
