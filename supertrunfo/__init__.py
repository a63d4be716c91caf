"""Super Trunfo card games for Brazilian cities and countries."""

__version__ = "1.0.0"
__all__ = ["registration", "comparison", "single_attribute", "countries", "rounds"]