"""Search engine building blocks: node contract, frontier and errors."""
