"""Infrastructure layer: configuration, logging, clock and quota stores."""
