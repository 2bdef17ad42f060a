"""SvSeeds Collector - copy SvSeeds UI components into a Svelte project."""

__version__ = "0.3.0"
