"""Pure helpers shared by provider adapters."""
