"""Blog platform backend: public blogs and posts, blogger management and super-admin moderation."""

__version__ = "1.0.0"
