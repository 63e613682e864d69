# Yellow Pages directory service.
# The search engine lives in yellowpages.search; the HTTP API in yellowpages.app.

__version__ = "0.1.0"
