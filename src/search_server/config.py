"""
Tunable constants for the search server.

Per-instance overrides are passed as keyword arguments to ``SearchServer``
and ``RequestQueue``; the class attributes here are the defaults.
"""


class Config:
    """Default engine parameters."""

    # Ranking
    max_result_document_count: int = 5
    relevance_epsilon: float = 1e-6  # relevances closer than this are tied

    # Request tracking: one simulated day at one request per minute
    request_window: int = 1440

    # Console output
    default_page_size: int = 2
