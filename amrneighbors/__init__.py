"""Find protein pairs with shared 5-mers and differing AMR classes, and align them."""

__version__ = "0.1.0"