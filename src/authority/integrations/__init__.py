"""Framework integrations for authority."""
