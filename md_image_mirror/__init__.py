"""Mirror CDN-hosted images referenced from Markdown documents into a local folder."""

__version__ = "0.1.0"
