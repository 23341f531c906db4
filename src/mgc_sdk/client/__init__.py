"""HTTP core: request building, response decoding, errors and pagination."""
