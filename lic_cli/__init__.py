"""Generate LICENSE files from bundled license templates."""

__version__ = "0.1.0"
