"""Essential tools and the data they serve."""
