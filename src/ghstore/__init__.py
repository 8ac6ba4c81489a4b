"""ghstore: discover a developer's GitHub repositories and what can be installed from them."""

__version__ = "0.1.0"
