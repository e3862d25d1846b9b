"""Generate SEO copy and podcasts from organization websites."""

__version__ = "1.0.0"
