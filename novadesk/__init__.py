"""A simulated desktop: window management, text-rendered widgets, collaboration tools and kernel service registries."""

__version__ = "0.1.0"