"""Level discovery, on-disk layout and partitioning of level-file worlds."""
