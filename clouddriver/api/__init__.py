"""HTTP boundary: health routes and catalog dependency."""
