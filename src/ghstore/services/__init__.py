"""Services for ghstore."""
