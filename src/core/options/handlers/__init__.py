# Option handlers register themselves with @option_handler on import.
