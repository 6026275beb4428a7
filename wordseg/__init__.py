"""HMM word segmentation, keyword extraction, simhash fingerprints, INI and
config reading, and word-frequency dictionary building."""

__version__ = "0.1.0"