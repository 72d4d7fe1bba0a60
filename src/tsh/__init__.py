"""tsh - a small interactive command interpreter."""
