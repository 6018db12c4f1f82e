"""REST API for the POSLink demo."""
