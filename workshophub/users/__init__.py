"""Identity store: user accounts and roles."""
