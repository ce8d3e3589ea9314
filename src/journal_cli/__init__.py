"""journal-cli - scaffold a personal journal and append dated entries."""
