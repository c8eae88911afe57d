"""Click commands registered on the ``dictum`` group."""
