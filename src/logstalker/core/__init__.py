"""Log shipping core: parsing, partitioning and dispatch."""
