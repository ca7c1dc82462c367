"""Store-wide key/value settings (tax, shipping, store identity, ...)."""
