"""Client-side building blocks for a columnar database's native protocol."""

__version__ = "0.1.0"
__all__ = ["binding", "query_settings", "result", "rows", "tls_config", "word_matcher"]