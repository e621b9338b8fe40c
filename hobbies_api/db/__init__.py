"""Database package — declarative Base and the sample-data seeding script."""
