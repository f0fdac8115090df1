"""Find the cheapest delivery plan for a cargo hauler: scenario parsing, simulation, search and a command line."""

__version__ = "0.1.0"