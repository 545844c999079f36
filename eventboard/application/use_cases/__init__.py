"""Use cases: catalog loading, favorites and event writes."""
