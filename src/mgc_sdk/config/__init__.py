"""SDK and CLI configuration."""
