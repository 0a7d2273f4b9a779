"""Decision logging for moderation outcomes."""
