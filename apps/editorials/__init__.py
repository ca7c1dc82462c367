"""Editorial articles and the event photo gallery."""
