"""Key set retrieval and caching."""
