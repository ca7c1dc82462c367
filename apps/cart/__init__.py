"""Shopping cart for signed-in users and guest sessions."""
