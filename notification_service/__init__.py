"""REST service managing the lifecycle of notification records."""
