"""Core services for bagpack: configuration, paths, theme and collection."""
