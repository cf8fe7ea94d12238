"""Score feed and market search sources plus the background poll loop."""
