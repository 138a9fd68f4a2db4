"""Testing – reusable property-based testing strategies.

Requires the ``testing`` extra::

    pip install "szuru-client[testing]"
"""
from szuru_client.testing.strategies import (
    catalog_token_strategy,
    paged_result_strategy,
    query_token_strategy,
)

__all__ = ["catalog_token_strategy", "paged_result_strategy", "query_token_strategy"]
