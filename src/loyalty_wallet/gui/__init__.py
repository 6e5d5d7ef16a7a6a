"""GUI components for Loyalty Wallet."""
