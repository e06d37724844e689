"""Services: parsers, request builder and the fetch pipeline."""
